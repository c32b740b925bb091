# views/allowance_view.py
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from labor.serializers.allowance_serializer import (
    AllowanceCalculateSerializer, AllowanceResultSerializer, MinimumWageSerializer,
)
from labor.services import allowance_service, wage_rules
from labor.services.contract_service import get_contract

from .utils import extend_schema, q_bool, std_errors, service_error_response, SERVICE_ERRORS


# -----------------------------
# /api/allowances/calculate/
# -----------------------------
class AllowanceCalculateView(APIView):
    @extend_schema(
        tags=["Allowance"],
        summary="Calculate overtime / holiday / annual-leave allowance",
        description=(
            "overtime, holiday: hourly_wage × 1.5 × hours. "
            "annual_leave: hourly_wage × daily_work_hours × days (days ≤ 26). "
            "With `contract_id`, wage and daily hours come from the contract. Nothing is saved."
        ),
        request=AllowanceCalculateSerializer,
        responses={200: AllowanceResultSerializer, **std_errors()},
    )
    def post(self, request):
        ser = AllowanceCalculateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        try:
            if "contract_id" in data:
                contract = get_contract(data["contract_id"])
                result = allowance_service.compute_for_contract(
                    contract, data["allowance_type"], hours=data.get("hours"), days=data.get("days"),
                )
            else:
                result = allowance_service.compute(
                    data["allowance_type"],
                    hourly_wage=data["hourly_wage"],
                    hours=data.get("hours"),
                    days=data.get("days"),
                    daily_work_hours=data.get("daily_work_hours"),
                )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(AllowanceResultSerializer(result.as_dict()).data)


# -----------------------------
# /api/allowances/minimum-wage/
# -----------------------------
class MinimumWageView(APIView):
    @extend_schema(
        tags=["Allowance"],
        summary="Effective minimum hourly wage (with / without weekly holiday pay)",
        parameters=[q_bool("include_weekly_holiday_pay", "Weekly holiday pay bundled into the hourly wage")],
        responses={200: MinimumWageSerializer},
    )
    def get(self, request):
        raw = (request.query_params.get("include_weekly_holiday_pay") or "").strip().lower()
        include = raw in ("1", "true", "yes", "on")
        base = wage_rules.base_minimum_wage()
        data = {
            "base_minimum_wage": base,
            "weekly_holiday_multiplier": wage_rules.weekly_holiday_multiplier(),
            "include_weekly_holiday_pay": include,
            "effective_floor": wage_rules.effective_floor(base, include),
        }
        return Response(MinimumWageSerializer(data).data, status=status.HTTP_200_OK)
