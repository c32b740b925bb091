from django.urls import path
from labor.views.allowance_view import AllowanceCalculateView, MinimumWageView

urlpatterns = [
    # /api/allowances/calculate/
    path("calculate/", AllowanceCalculateView.as_view(), name="allowance-calculate"),
    # /api/allowances/minimum-wage/
    path("minimum-wage/", MinimumWageView.as_view(), name="minimum-wage"),
]
