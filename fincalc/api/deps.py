"""Route Dependencies — build stores per request from the request's DB session.

Invariants:
    - One AsyncSession per request (get_db), shared by every store the route uses
    - Storage timeout comes from settings, never hardcoded in routes
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.config import Settings, get_settings
from fincalc.infrastructure.credentials import (
    OpaqueTokenIssuer, PlaintextCredentialVerifier,
)
from fincalc.infrastructure.database import get_db
from fincalc.infrastructure.sql_repositories import (
    SqlAccountRepository, SqlFinancialProfileRepository,
)
from fincalc.services.account_store import AccountStore
from fincalc.services.profile_store import FinancialProfileStore
from fincalc.services.session_service import SessionService


def get_account_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AccountStore:
    return AccountStore(
        SqlAccountRepository(db), settings.storage_timeout_seconds,
    )


def get_profile_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> FinancialProfileStore:
    return FinancialProfileStore(
        SqlFinancialProfileRepository(db), settings.storage_timeout_seconds,
    )


def get_session_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SessionService:
    return SessionService(
        SqlAccountRepository(db),
        PlaintextCredentialVerifier(),
        OpaqueTokenIssuer(),
        settings.storage_timeout_seconds,
    )
