"""Financial Profile Schemas — request/response shapes for /api/financials."""

from datetime import datetime

from fincalc.core.records import FinancialProfile
from fincalc.schemas.base import CamelModel


class FinancialFields(CamelModel):
    """Optional numeric fields; a request may carry only one calculator's inputs."""
    monthly_income: float | None = None
    monthly_expenses: float | None = None
    loan_amount: float | None = None
    interest_rate: float | None = None
    loan_term: float | None = None
    monthly_contribution: float | None = None
    investment_duration: float | None = None


class FinancialCreate(FinancialFields):
    user_id: int


class FinancialCreated(CamelModel):
    data_id: int
    user_id: int
    created_at: datetime


class FinancialRecord(FinancialFields):
    id: int
    user_id: int
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: FinancialProfile) -> "FinancialRecord":
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            created_at=profile.created_at,
            **profile.numeric_fields(),
        )


class FinancialRecordList(CamelModel):
    records: list[FinancialRecord]
