"""Domain Records — immutable values returned by the stores.

Invariants:
    - Records are frozen: accounts and profiles are never mutated after creation
    - id and created_at are always server-assigned
    - Records carry no ORM state (safe to pass outside a DB session)
"""

from dataclasses import dataclass, fields
from datetime import datetime

from fincalc.core.domain_types import AccountId, ProfileId


@dataclass(frozen=True)
class Account:
    id: AccountId
    email: str
    password: str
    created_at: datetime


@dataclass(frozen=True)
class FinancialProfile:
    id: ProfileId
    user_id: int
    created_at: datetime
    monthly_income: float | None = None
    monthly_expenses: float | None = None
    loan_amount: float | None = None
    interest_rate: float | None = None
    loan_term: float | None = None
    monthly_contribution: float | None = None
    investment_duration: float | None = None

    def numeric_fields(self) -> dict[str, float | None]:
        """Optional numeric columns only (no id, user_id, created_at)."""
        skip = {"id", "user_id", "created_at"}
        return {
            f.name: getattr(self, f.name) for f in fields(self) if f.name not in skip
        }


@dataclass(frozen=True)
class SessionGrant:
    """Session identifier and bearer token issued after a credential match."""
    session_id: str
    token: str
