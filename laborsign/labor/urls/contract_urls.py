# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from labor.views.contract_view import ContractViewSet

router = DefaultRouter()
router.register(r"contracts", ContractViewSet, basename="contract")

urlpatterns = [
    path("", include(router.urls)),
]
