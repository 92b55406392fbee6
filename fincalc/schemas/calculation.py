"""Calculation Schemas — request/response shapes for /api/calculations.

Invariants:
    - Field names mirror the financial profile fields (interestRate, loanTerm, ...)
    - Range checks live in core/calculations.py; schemas only parse types
"""

from fincalc.schemas.base import CamelModel


class NetSavingsRequest(CamelModel):
    income: float
    expenses: float


class NetSavingsResponse(CamelModel):
    net_savings: float


class LoanPaymentRequest(CamelModel):
    loan_amount: float
    interest_rate: float
    loan_term: float
    include_schedule: bool = False


class AmortizationEntry(CamelModel):
    month: int
    payment: float
    interest: float
    principal: float
    balance: float


class LoanPaymentResponse(CamelModel):
    monthly_payment: float
    total_payment: float
    schedule: list[AmortizationEntry] | None = None


class SavingsProjectionRequest(CamelModel):
    monthly_contribution: float
    interest_rate: float
    investment_duration: float
    include_schedule: bool = False


class SavingsEntry(CamelModel):
    month: int
    contribution: float
    interest: float
    balance: float


class SavingsProjectionResponse(CamelModel):
    future_value: float
    schedule: list[SavingsEntry] | None = None
