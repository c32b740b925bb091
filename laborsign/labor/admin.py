from django.contrib import admin
from .models import Contract, ContractFolder


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ("id", "employer_name", "worker_name", "wage_type", "hourly_wage", "status", "folder", "created_at")
    list_filter = ("status", "wage_type", "is_comprehensive_wage", "business_size")
    search_fields = ("employer_name", "worker_name", "business_name", "work_location")
    raw_id_fields = ("folder",)


@admin.register(ContractFolder)
class ContractFolderAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "color", "owner_id", "created_at")
    list_filter = ("color",)
    search_fields = ("name",)
