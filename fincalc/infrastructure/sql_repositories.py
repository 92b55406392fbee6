"""SQL Repositories — SQLAlchemy implementations of the core repository protocols.

Invariants:
    - Email uniqueness decided by the users.email UNIQUE constraint at INSERT time;
      an IntegrityError on insert becomes DuplicateEmailError
    - Any other SQLAlchemyError becomes an opaque InternalError (detail logged only)
    - ORM rows are converted to frozen core records before leaving this module
    - list_by_user orders by id (creation order)
"""

import logging
from typing import NoReturn

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.core.domain_types import AccountId, ProfileId
from fincalc.core.errors import DuplicateEmailError, InternalError
from fincalc.core.records import Account, FinancialProfile
from fincalc.models.account import AccountModel
from fincalc.models.financial_profile import FinancialProfileModel

logger = logging.getLogger(__name__)


def _to_account(row: AccountModel) -> Account:
    return Account(
        id=AccountId(row.id), email=row.email,
        password=row.password, created_at=row.created_at,
    )


def _to_profile(row: FinancialProfileModel) -> FinancialProfile:
    return FinancialProfile(
        id=ProfileId(row.id),
        user_id=row.user_id,
        created_at=row.created_at,
        monthly_income=row.monthly_income,
        monthly_expenses=row.monthly_expenses,
        loan_amount=row.loan_amount,
        interest_rate=row.interest_rate,
        loan_term=row.loan_term,
        monthly_contribution=row.monthly_contribution,
        investment_duration=row.investment_duration,
    )


async def _rollback_and_raise_internal(
    db: AsyncSession, operation: str, exc: SQLAlchemyError,
) -> NoReturn:
    await db.rollback()
    logger.error(
        f"Repository {operation} failed: {exc}",
        extra={"operation": operation}, exc_info=True,
    )
    raise InternalError(operation) from exc


class SqlAccountRepository:
    """AccountRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, email: str, password: str) -> Account:
        row = AccountModel(email=email, password=password)
        self._db.add(row)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.info(
                "Account insert rejected by unique constraint",
                extra={"operation": "account.insert"},
            )
            raise DuplicateEmailError(email) from e
        except SQLAlchemyError as e:
            await _rollback_and_raise_internal(self._db, "account.insert", e)
        await self._db.refresh(row)
        return _to_account(row)

    async def get_by_id(self, account_id: AccountId) -> Account | None:
        try:
            row = await self._db.get(AccountModel, account_id)
        except SQLAlchemyError as e:
            await _rollback_and_raise_internal(self._db, "account.get_by_id", e)
        return _to_account(row) if row else None

    async def get_by_email(self, email: str) -> Account | None:
        try:
            result = await self._db.execute(
                select(AccountModel).where(AccountModel.email == email),
            )
        except SQLAlchemyError as e:
            await _rollback_and_raise_internal(self._db, "account.get_by_email", e)
        row = result.scalar_one_or_none()
        return _to_account(row) if row else None


class SqlFinancialProfileRepository:
    """FinancialProfileRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(
        self, user_id: int, values: dict[str, float | None],
    ) -> FinancialProfile:
        row = FinancialProfileModel(user_id=user_id, **values)
        self._db.add(row)
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            await _rollback_and_raise_internal(self._db, "profile.insert", e)
        await self._db.refresh(row)
        return _to_profile(row)

    async def list_by_user(self, user_id: int) -> list[FinancialProfile]:
        try:
            result = await self._db.execute(
                select(FinancialProfileModel)
                .where(FinancialProfileModel.user_id == user_id)
                .order_by(FinancialProfileModel.id),
            )
        except SQLAlchemyError as e:
            await _rollback_and_raise_internal(self._db, "profile.list_by_user", e)
        return [_to_profile(row) for row in result.scalars().all()]
