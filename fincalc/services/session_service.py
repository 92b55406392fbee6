"""Session Service — exchanges email/password for a session id and token.

Invariants:
    - Email lookup is exact-match (same rule as account uniqueness)
    - Unknown email and wrong password raise the same AuthenticationError
    - Credential checking and token minting are injected capabilities
"""

import logging

from fincalc.core.errors import AuthenticationError
from fincalc.core.records import SessionGrant
from fincalc.core.repository_protocols import (
    AccountRepository, CredentialVerifier, TokenIssuer,
)
from fincalc.core.validation import require_non_empty_str
from fincalc.services.storage_calls import call_with_timeout

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(
        self,
        accounts: AccountRepository,
        verifier: CredentialVerifier,
        issuer: TokenIssuer,
        timeout_seconds: float | None = None,
    ):
        self._accounts = accounts
        self._verifier = verifier
        self._issuer = issuer
        self._timeout = timeout_seconds

    async def create_session(self, email: object, password: object) -> SessionGrant:
        email = require_non_empty_str(email, "email")
        password = require_non_empty_str(password, "password")
        account = await call_with_timeout(
            self._accounts.get_by_email(email),
            "session.lookup", self._timeout,
        )
        if account is None or not self._verifier.verify(password, account.password):
            logger.info("Session rejected", extra={"error_code": "INVALID_CREDENTIALS"})
            raise AuthenticationError()
        grant = self._issuer.issue(account)
        logger.info("Session issued", extra={"account_id": account.id})
        return grant
