# -*- coding: utf-8 -*-
from __future__ import annotations
from decimal import ROUND_HALF_UP
from rest_framework import serializers
from labor.models import Contract, WORK_DAYS
from labor.services import wage_rules


class ComprehensiveWageDetailsSerializer(serializers.Serializer):
    overtime_per_hour = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)
    night_allowance = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)
    holiday_per_day = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)
    annual_leave_per_day = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)

    def to_internal_value(self, data):
        # DRF drops unknown nested keys; reject them instead
        if isinstance(data, dict):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError({k: "Unknown allowance key." for k in unknown})
        return super().to_internal_value(data)


class ContractReadSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    wage_type_display = serializers.CharField(source="get_wage_type_display", read_only=True)
    contract_mode = serializers.CharField(read_only=True)
    daily_work_hours = serializers.DecimalField(max_digits=5, decimal_places=2, rounding=ROUND_HALF_UP, read_only=True)
    folder_id = serializers.IntegerField(read_only=True, allow_null=True)
    has_employer_signature = serializers.SerializerMethodField()
    has_worker_signature = serializers.SerializerMethodField()
    paid_separately = serializers.SerializerMethodField()

    class Meta:
        model = Contract
        fields = [
            "id",
            "employer_id", "worker_id", "employer_name", "worker_name",
            "wage_type", "wage_type_display", "hourly_wage", "monthly_wage", "include_weekly_holiday_pay",
            "start_date", "end_date", "no_end_date",
            "work_days", "work_days_per_week", "work_start_time", "work_end_time", "break_minutes",
            "daily_work_hours",
            "work_location", "business_name", "job_description",
            "payment_day", "payment_month", "payment_end_of_month",
            "status", "status_display",
            "has_employer_signature", "has_worker_signature",
            "is_comprehensive_wage", "business_size", "comprehensive_wage_details", "paid_separately",
            "contract_mode",
            "folder_id",
            "created_at", "updated_at",
        ]

    def get_has_employer_signature(self, obj) -> bool:
        return bool(obj.employer_signature)

    def get_has_worker_signature(self, obj) -> bool:
        return bool(obj.worker_signature)

    def get_paid_separately(self, obj) -> list:
        # allowances not bundled into a comprehensive wage
        if not obj.is_comprehensive_wage:
            return []
        return wage_rules.paid_separately(obj.comprehensive_wage_details)


# ===== Writes (create = full, update = partial=True) =====
class ContractWriteSerializer(serializers.Serializer):
    employer_id = serializers.IntegerField(required=False, allow_null=True)
    worker_id = serializers.IntegerField(required=False, allow_null=True)
    employer_name = serializers.CharField(max_length=100)
    worker_name = serializers.CharField(max_length=100)

    wage_type = serializers.ChoiceField(choices=Contract.WageType.choices, required=False, default=Contract.WageType.HOURLY)
    hourly_wage = serializers.DecimalField(max_digits=12, decimal_places=2)
    monthly_wage = serializers.DecimalField(max_digits=14, decimal_places=2, required=False, allow_null=True)
    include_weekly_holiday_pay = serializers.BooleanField(required=False, default=False)

    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False, allow_null=True)
    no_end_date = serializers.BooleanField(required=False, default=False)

    work_days = serializers.ListField(child=serializers.ChoiceField(choices=WORK_DAYS), required=False, default=list)
    work_days_per_week = serializers.IntegerField(min_value=1, max_value=7, required=False, allow_null=True)
    work_start_time = serializers.TimeField()
    work_end_time = serializers.TimeField()
    break_minutes = serializers.IntegerField(min_value=0, required=False, allow_null=True)

    work_location = serializers.CharField(max_length=255)
    business_name = serializers.CharField(max_length=120, required=False, allow_blank=True, default="")
    job_description = serializers.CharField(required=False, allow_blank=True, default="")

    payment_day = serializers.IntegerField(min_value=1, max_value=31, required=False, allow_null=True)
    payment_month = serializers.ChoiceField(choices=Contract.PaymentMonth.choices, required=False, allow_blank=True, default="")
    payment_end_of_month = serializers.BooleanField(required=False, default=False)

    is_comprehensive_wage = serializers.BooleanField(required=False, default=False)
    business_size = serializers.ChoiceField(choices=Contract.BusinessSize.choices, required=False, allow_blank=True, default="")
    comprehensive_wage_details = ComprehensiveWageDetailsSerializer(required=False, allow_null=True)

    def validate_comprehensive_wage_details(self, value):
        return dict(value) if value is not None else None


class ContractTransitionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Contract.Status.choices)


class ContractSignSerializer(serializers.Serializer):
    party = serializers.ChoiceField(choices=[("employer", "Employer"), ("worker", "Worker")])
    signature = serializers.CharField()


# ===== Dashboard / bulk =====
class BulkDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)


class BulkMoveSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)
    folder_id = serializers.IntegerField(allow_null=True)
    owner_id = serializers.IntegerField(required=False, allow_null=True)


class DashboardSerializer(serializers.Serializer):
    folder_id = serializers.IntegerField(allow_null=True)
    pending = ContractReadSerializer(many=True)
    completed = ContractReadSerializer(many=True)
    selectable_ids = serializers.ListField(child=serializers.IntegerField())
