"""ORM Models — SQLAlchemy declarative models for persisted records.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models never leave infrastructure/: repositories convert rows to core records

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from fincalc.models.account import AccountModel  # noqa: F401
from fincalc.models.financial_profile import FinancialProfileModel  # noqa: F401
