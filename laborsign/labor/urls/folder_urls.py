# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path, include
from rest_framework.routers import SimpleRouter
from labor.views.folder_view import FolderViewSet

router = SimpleRouter()
router.register(r"folders", FolderViewSet, basename="folder")

urlpatterns = [
    path("", include(router.urls)),
]
