"""Calculations — HTTP access to the pure calculation engine.

Invariants:
    - No DB access; every endpoint is a thin wrapper over core/calculations.py
    - Out-of-range inputs surface as 400 ValidationError from the engine
    - Schedules only computed when includeSchedule is true, and never longer
      than settings.max_schedule_months rows
"""

from fastapi import APIRouter, Depends

from fincalc.config import Settings, get_settings
from fincalc.core import calculations
from fincalc.schemas.calculation import (
    AmortizationEntry, LoanPaymentRequest, LoanPaymentResponse,
    NetSavingsRequest, NetSavingsResponse, SavingsEntry,
    SavingsProjectionRequest, SavingsProjectionResponse,
)

router = APIRouter(prefix="/api/calculations", tags=["calculations"])


@router.post("/net-savings", response_model=NetSavingsResponse)
async def net_savings(body: NetSavingsRequest):
    return NetSavingsResponse(
        net_savings=calculations.net_savings(body.income, body.expenses),
    )


@router.post("/loan-payment", response_model=LoanPaymentResponse)
async def loan_payment(
    body: LoanPaymentRequest, settings: Settings = Depends(get_settings),
):
    result = calculations.loan_payment(
        body.loan_amount, body.interest_rate, body.loan_term,
    )
    schedule = None
    if body.include_schedule:
        schedule = [
            AmortizationEntry(
                month=row.month, payment=row.payment, interest=row.interest,
                principal=row.principal, balance=row.balance,
            )
            for row in calculations.amortization_schedule(
                body.loan_amount, body.interest_rate, body.loan_term,
                max_months=settings.max_schedule_months,
            )
        ]
    return LoanPaymentResponse(
        monthly_payment=result.monthly_payment,
        total_payment=result.total_payment,
        schedule=schedule,
    )


@router.post("/savings-projection", response_model=SavingsProjectionResponse)
async def savings_projection(
    body: SavingsProjectionRequest, settings: Settings = Depends(get_settings),
):
    future_value = calculations.project_savings(
        body.monthly_contribution, body.interest_rate, body.investment_duration,
    )
    schedule = None
    if body.include_schedule:
        schedule = [
            SavingsEntry(
                month=row.month, contribution=row.contribution,
                interest=row.interest, balance=row.balance,
            )
            for row in calculations.savings_schedule(
                body.monthly_contribution, body.interest_rate,
                body.investment_duration,
                max_months=settings.max_schedule_months,
            )
        ]
    return SavingsProjectionResponse(
        future_value=future_value, schedule=schedule,
    )
