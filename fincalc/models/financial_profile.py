"""Financial Profile ORM — persists calculator inputs in the `financials` table.

Invariants:
    - user_id is indexed but NOT a foreign key (profiles may reference unknown accounts)
    - Every numeric column is nullable: a row may carry only one calculator's fields
    - No numeric bounds at the storage level

Design Decisions:
    - Float for every numeric column, including loan_term and investment_duration:
      the store accepts any finite number and leaves month-count rules to the engine
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from fincalc.db.base import Base


class FinancialProfileModel(Base):
    __tablename__ = "financials"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    monthly_income: Mapped[float | None] = mapped_column(Float, nullable=True)
    monthly_expenses: Mapped[float | None] = mapped_column(Float, nullable=True)
    loan_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    interest_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    loan_term: Mapped[float | None] = mapped_column(Float, nullable=True)
    monthly_contribution: Mapped[float | None] = mapped_column(Float, nullable=True)
    investment_duration: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
