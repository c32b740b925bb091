from types import SimpleNamespace

from labor.services.dashboard_service import (
    is_visible_unfiled, is_visible_in_folder, filter_for_view, dedupe_by_id,
    selectable_ids, select, toggle, toggle_select_all,
)


def ct(id, status="completed", folder_id=None):
    return SimpleNamespace(id=id, status=status, folder_id=folder_id)


def test_pending_with_folder_shows_unfiled_only():
    c = ct("p", status="pending", folder_id="A")
    assert is_visible_unfiled(c)
    assert not is_visible_in_folder(c, "A")
    assert filter_for_view([c], "A") == []
    assert filter_for_view([c]) == [c]


def test_completed_in_folder():
    c = ct(1, folder_id="A")
    assert not is_visible_unfiled(c)
    assert is_visible_in_folder(c, "A")
    assert not is_visible_in_folder(c, "B")


def test_dedupe_first_occurrence_wins():
    x1 = ct("x", status="pending")
    y = ct("y")
    x2 = ct("x")
    out = dedupe_by_id([x1, y], [x2, ct("z")])
    assert [c.id for c in out] == ["x", "y", "z"]
    assert out[0] is x1


def test_select_only_completed_and_idempotent():
    done, pend = ct(1), ct(2, status="pending")
    sel = select(set(), done)
    assert select(sel, done) == {1}
    assert select(sel, pend) == {1}


def test_toggle():
    c = ct(1)
    sel = toggle(set(), c)
    assert sel == {1}
    assert toggle(sel, c) == set()


def test_toggle_select_all():
    items = [ct(1), ct(2), ct(3, status="pending")]
    assert selectable_ids(items) == {1, 2}
    all_sel = toggle_select_all(set(), items)
    assert all_sel == {1, 2}
    assert toggle_select_all(all_sel, items) == set()
    assert toggle_select_all({1}, items) == {1, 2}


def test_selection_helpers_do_not_mutate_input():
    sel = {1}
    toggle_select_all(sel, [ct(1), ct(2)])
    select(sel, ct(2))
    assert sel == {1}
