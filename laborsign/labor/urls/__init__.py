# labor/urls/__init__.py
from django.urls import path, include

urlpatterns = [
    path("", include("labor.urls.contract_urls")),
    path("", include("labor.urls.folder_urls")),
    path("allowances/", include("labor.urls.allowance_urls")),
]
