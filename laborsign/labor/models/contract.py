from datetime import datetime, timedelta
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q, CheckConstraint

from .mixins import TimeStampedModel
from .folder import ContractFolder

# Display order Mon → Sun
WORK_DAYS = ["월", "화", "수", "목", "금", "토", "일"]

# Per-unit rates baked into a comprehensive (flat) wage
COMPREHENSIVE_DETAIL_KEYS = (
    "overtime_per_hour",     # 연장근로수당 (1시간당)
    "night_allowance",       # 야간근로수당
    "holiday_per_day",       # 휴일근로수당 (1일당)
    "annual_leave_per_day",  # 연차유급휴가 수당 (1일당)
)


class Contract(TimeStampedModel):
    class WageType(models.TextChoices):
        HOURLY = "hourly", "시급"
        MONTHLY = "monthly", "월급"

    class Status(models.TextChoices):
        DRAFT = "draft", "작성 중"
        PENDING = "pending", "서명 대기"
        SIGNED = "signed", "서명 완료"
        COMPLETED = "completed", "계약 완료"

    class PaymentMonth(models.TextChoices):
        CURRENT = "current", "당월"
        NEXT = "next", "익월"

    class BusinessSize(models.TextChoices):
        UNDER5 = "under5", "5인 미만"
        OVER5 = "over5", "5인 이상"

    employer_id = models.IntegerField(null=True, blank=True, db_index=True)
    worker_id = models.IntegerField(null=True, blank=True, db_index=True)
    employer_name = models.CharField(max_length=100)
    worker_name = models.CharField(max_length=100)

    wage_type = models.CharField(max_length=10, choices=WageType.choices, default=WageType.HOURLY)
    hourly_wage = models.DecimalField(max_digits=12, decimal_places=2)
    monthly_wage = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    include_weekly_holiday_pay = models.BooleanField(default=False, help_text="시급에 주휴수당 포함 여부")

    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    no_end_date = models.BooleanField(default=False)

    work_days = models.JSONField(default=list, blank=True)
    work_days_per_week = models.PositiveSmallIntegerField(null=True, blank=True)
    work_start_time = models.TimeField()
    work_end_time = models.TimeField()
    break_minutes = models.PositiveIntegerField(null=True, blank=True)

    work_location = models.CharField(max_length=255)
    business_name = models.CharField(max_length=120, blank=True, default="")
    job_description = models.TextField(blank=True, default="")

    payment_day = models.PositiveSmallIntegerField(null=True, blank=True)
    payment_month = models.CharField(max_length=10, choices=PaymentMonth.choices, blank=True, default="")
    payment_end_of_month = models.BooleanField(default=False)

    status = models.CharField(max_length=12, choices=Status.choices, default=Status.DRAFT, db_index=True)
    employer_signature = models.TextField(blank=True, default="")
    worker_signature = models.TextField(blank=True, default="")

    is_comprehensive_wage = models.BooleanField(default=False, help_text="포괄임금계약 여부")
    business_size = models.CharField(max_length=10, choices=BusinessSize.choices, blank=True, default="")
    comprehensive_wage_details = models.JSONField(null=True, blank=True)

    folder = models.ForeignKey(
        ContractFolder, on_delete=models.SET_NULL, null=True, blank=True, related_name="contracts"
    )

    class Meta:
        ordering = ["-created_at"]
        db_table = "Contract"
        indexes = [
            models.Index(fields=["status", "created_at"]),
            models.Index(fields=["worker_id", "created_at"]),
        ]
        constraints = [
            CheckConstraint(name="contract_hourly_wage_positive", condition=Q(hourly_wage__gt=0)),
            CheckConstraint(
                name="contract_monthly_requires_amount",
                condition=~Q(wage_type="monthly") | Q(monthly_wage__isnull=False),
            ),
            CheckConstraint(
                name="contract_comprehensive_requires_size",
                condition=Q(is_comprehensive_wage=False) | ~Q(business_size=""),
            ),
            CheckConstraint(
                name="contract_end_after_start",
                condition=Q(end_date__isnull=True) | Q(end_date__gte=models.F("start_date")),
            ),
        ]

    def __str__(self):
        return f"CT#{self.pk} {self.employer_name}→{self.worker_name} [{self.get_status_display()}]"

    def clean(self):
        errors = {}
        if self.wage_type == self.WageType.MONTHLY and self.monthly_wage is None:
            errors["monthly_wage"] = "월급제 계약은 월급 금액이 필요합니다."
        if self.is_comprehensive_wage:
            if not self.business_size:
                errors["business_size"] = "포괄임금계약은 사업장 규모가 필요합니다."
            if self.comprehensive_wage_details is None:
                errors["comprehensive_wage_details"] = "포괄임금계약은 수당 세부 내역이 필요합니다."
        if errors:
            raise ValidationError(errors)

    @property
    def contract_mode(self) -> str:
        base = "monthly" if self.wage_type == self.WageType.MONTHLY else "hourly"
        return f"{base}_comprehensive" if self.is_comprehensive_wage else base

    @property
    def daily_work_hours(self) -> Decimal:
        """Scheduled hours per working day: end - start (wraps past midnight) minus break."""
        day = datetime(2000, 1, 1)
        start = datetime.combine(day, self.work_start_time)
        end = datetime.combine(day, self.work_end_time)
        if end <= start:
            end += timedelta(days=1)
        minutes = int((end - start).total_seconds() // 60) - int(self.break_minutes or 0)
        # unrounded; display code quantizes
        return Decimal(max(minutes, 0)) / Decimal(60)
