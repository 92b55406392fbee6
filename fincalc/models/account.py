"""Account ORM — persists user accounts in the `users` table.

Invariants:
    - id is an autoincrement integer primary key (monotonically increasing)
    - email carries a UNIQUE constraint; the database is the only arbiter of uniqueness
    - password stored as given (hashing is a CredentialVerifier concern)
    - created_at assigned on insert, never updated
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from fincalc.db.base import Base


class AccountModel(Base):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    password: Mapped[str] = mapped_column(String(1024), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
