"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AccountId, ProfileId wrap server-assigned integers
    - ProfileField lists every optional numeric column of a financial profile
    - MonthlyRate is a fraction (0.01 == 1% per month), never a percentage

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", int)
ProfileId = NewType("ProfileId", int)


# ─── Value Types ─────────────────────────────────────────────────

MonthlyRate = NewType("MonthlyRate", float)   # annual percent / 100 / 12


# ─── Enums ───────────────────────────────────────────────────────

class ProfileField(str, Enum):
    """Optional numeric fields carried by a financial profile."""
    MONTHLY_INCOME = "monthly_income"
    MONTHLY_EXPENSES = "monthly_expenses"
    LOAN_AMOUNT = "loan_amount"
    INTEREST_RATE = "interest_rate"
    LOAN_TERM = "loan_term"
    MONTHLY_CONTRIBUTION = "monthly_contribution"
    INVESTMENT_DURATION = "investment_duration"


PROFILE_FIELD_NAMES: frozenset[str] = frozenset(f.value for f in ProfileField)
