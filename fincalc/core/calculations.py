"""Calculation Engine — pure financial projections: net savings, loan amortization, savings growth.

Invariants:
    - Every function is pure and deterministic (no IO, no shared state, thread-safe)
    - All arithmetic in double-precision float; no rounding applied here
    - Negative or non-finite inputs raise ValidationError, never return NaN
    - Month counts are whole numbers >= 1 (0 is rejected, not divided by)
    - Growth factor (1 + r) ** n computed once and reused for numerator and denominator
    - A growth factor that overflows, or a non-finite result, raises ValidationError
      naming the month-count field
    - Schedules are capped at max_months rows

Design Decisions:
    - Monthly rate derived as annual_percent / 100 / 12 in that order, so results
      stay reproducible across implementations
    - Zero-rate branch keyed on f == 1.0 rather than r == 0, so rates below float
      resolution take the linear path instead of dividing by zero
    - Currency rounding is a presentation concern left to callers
"""

import math
from dataclasses import dataclass

from fincalc.core.domain_types import MonthlyRate
from fincalc.core.errors import ValidationError
from fincalc.core.validation import require_month_count, require_non_negative

# 100 years of monthly rows
MAX_SCHEDULE_MONTHS = 1200


@dataclass(frozen=True)
class LoanPayment:
    """Fixed monthly payment and total repaid over the term."""
    monthly_payment: float
    total_payment: float


@dataclass(frozen=True)
class AmortizationRow:
    """One month of a loan repayment schedule."""
    month: int
    payment: float
    interest: float
    principal: float
    balance: float


@dataclass(frozen=True)
class SavingsRow:
    """One month of a savings projection."""
    month: int
    contribution: float
    interest: float
    balance: float


def monthly_rate(annual_rate_percent: float) -> MonthlyRate:
    """Convert an annual percentage rate into a monthly fraction."""
    return MonthlyRate(annual_rate_percent / 100 / 12)


def _growth_factor(r: float, months: int, field: str) -> float:
    try:
        return (1 + r) ** months
    except OverflowError:
        raise ValidationError(
            f"{field} is too long to compound at this rate", field,
        ) from None


def _require_finite_result(value: float, field: str) -> float:
    if not math.isfinite(value):
        raise ValidationError(
            f"{field} is too long to compound at this rate", field,
        )
    return value


def _require_schedule_length(months: int, max_months: int, field: str) -> None:
    if months > max_months:
        raise ValidationError(
            f"{field} exceeds the {max_months}-month schedule limit", field,
        )


def net_savings(income: float, expenses: float) -> float:
    """Income minus expenses. A negative result is a real answer, not an error."""
    income = require_non_negative(income, "income")
    expenses = require_non_negative(expenses, "expenses")
    return income - expenses


def loan_payment(
    loan_amount: float, annual_rate_percent: float, term_months: int,
) -> LoanPayment:
    """Standard amortizing-loan payment: P * r * f / (f - 1) with f = (1 + r) ** n.

    A rate too small to move 1 + r off 1.0 is treated as zero.
    """
    loan_amount = require_non_negative(loan_amount, "loan_amount")
    annual_rate_percent = require_non_negative(
        annual_rate_percent, "annual_rate_percent",
    )
    term_months = require_month_count(term_months, "term_months")

    r = monthly_rate(annual_rate_percent)
    f = _growth_factor(r, term_months, "term_months")
    if f == 1.0:
        payment = loan_amount / term_months
    else:
        payment = _require_finite_result(
            loan_amount * r * f / (f - 1), "term_months",
        )
    return LoanPayment(
        monthly_payment=payment, total_payment=payment * term_months,
    )


def project_savings(
    monthly_contribution: float, annual_rate_percent: float, duration_months: int,
) -> float:
    """Future value of a fixed monthly contribution compounded monthly."""
    monthly_contribution = require_non_negative(
        monthly_contribution, "monthly_contribution",
    )
    annual_rate_percent = require_non_negative(
        annual_rate_percent, "annual_rate_percent",
    )
    duration_months = require_month_count(duration_months, "duration_months")

    r = monthly_rate(annual_rate_percent)
    f = _growth_factor(r, duration_months, "duration_months")
    if f == 1.0:
        return monthly_contribution * duration_months
    return _require_finite_result(
        monthly_contribution * (f - 1) / r, "duration_months",
    )


def amortization_schedule(
    loan_amount: float, annual_rate_percent: float, term_months: int,
    max_months: int = MAX_SCHEDULE_MONTHS,
) -> list[AmortizationRow]:
    """Month-by-month split of the fixed payment into interest and principal.

    The last row absorbs accumulated float drift so the balance ends at 0.0.
    """
    payment = loan_payment(
        loan_amount, annual_rate_percent, term_months,
    ).monthly_payment
    months = int(term_months)
    _require_schedule_length(months, max_months, "term_months")
    r = monthly_rate(float(annual_rate_percent))

    rows: list[AmortizationRow] = []
    balance = float(loan_amount)
    for month in range(1, months + 1):
        interest = balance * r
        principal = payment - interest
        if month == months:
            principal = balance
        balance = max(0.0, balance - principal)
        rows.append(AmortizationRow(
            month=month, payment=interest + principal, interest=interest,
            principal=principal, balance=balance,
        ))
    return rows


def savings_schedule(
    monthly_contribution: float, annual_rate_percent: float, duration_months: int,
    max_months: int = MAX_SCHEDULE_MONTHS,
) -> list[SavingsRow]:
    """Month-by-month balance for an end-of-month contribution stream."""
    project_savings(monthly_contribution, annual_rate_percent, duration_months)
    months = int(duration_months)
    _require_schedule_length(months, max_months, "duration_months")
    r = monthly_rate(float(annual_rate_percent))
    contribution = float(monthly_contribution)

    rows: list[SavingsRow] = []
    balance = 0.0
    for month in range(1, months + 1):
        interest = balance * r
        balance = balance + interest + contribution
        rows.append(SavingsRow(
            month=month, contribution=contribution,
            interest=interest, balance=balance,
        ))
    return rows
