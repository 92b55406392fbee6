"""Initial schema — users and financials.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password", sa.String(1024), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # user_id deliberately has no foreign key: profiles may reference unknown users
    op.create_table(
        "financials",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=False),
        sa.Column("monthly_income", sa.Float, nullable=True),
        sa.Column("monthly_expenses", sa.Float, nullable=True),
        sa.Column("loan_amount", sa.Float, nullable=True),
        sa.Column("interest_rate", sa.Float, nullable=True),
        sa.Column("loan_term", sa.Float, nullable=True),
        sa.Column("monthly_contribution", sa.Float, nullable=True),
        sa.Column("investment_duration", sa.Float, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_financials_user_id", "financials", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_financials_user_id", table_name="financials")
    op.drop_table("financials")
    op.drop_table("users")
