# -*- coding: utf-8 -*-
from rest_framework import serializers

from labor.services.allowance_service import ALLOWANCE_TYPES


class AllowanceCalculateSerializer(serializers.Serializer):
    allowance_type = serializers.ChoiceField(choices=[(t, t) for t in ALLOWANCE_TYPES])
    # either give the wage directly or point at a contract to read it from
    contract_id = serializers.IntegerField(required=False)
    hourly_wage = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    daily_work_hours = serializers.DecimalField(max_digits=5, decimal_places=2, required=False)
    hours = serializers.DecimalField(max_digits=7, decimal_places=2, required=False)
    days = serializers.DecimalField(max_digits=5, decimal_places=2, required=False)

    def validate(self, attrs):
        if "contract_id" not in attrs and "hourly_wage" not in attrs:
            raise serializers.ValidationError("hourly_wage or contract_id is required.")
        return attrs


class AllowanceResultSerializer(serializers.Serializer):
    allowance_type = serializers.CharField()
    title = serializers.CharField()
    amount = serializers.IntegerField()
    formula_description = serializers.CharField()


class MinimumWageSerializer(serializers.Serializer):
    base_minimum_wage = serializers.IntegerField()
    weekly_holiday_multiplier = serializers.DecimalField(max_digits=4, decimal_places=2)
    include_weekly_holiday_pay = serializers.BooleanField()
    effective_floor = serializers.IntegerField()
