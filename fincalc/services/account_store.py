"""Account Store — creates and retrieves user accounts.

Invariants:
    - email and password must be non-empty strings (ValidationError otherwise)
    - Uniqueness is left to AccountRepository.insert: no read-then-write existence check,
      so two concurrent creations with the same email cannot both succeed
    - Accounts are never updated or deleted
    - Ids outside the 64-bit range are NotFound without a storage round trip
"""

import logging

from fincalc.core.domain_types import AccountId
from fincalc.core.errors import NotFoundError
from fincalc.core.records import Account
from fincalc.core.repository_protocols import AccountRepository
from fincalc.core.validation import (
    is_storable_identifier, require_identifier, require_non_empty_str,
)
from fincalc.services.storage_calls import call_with_timeout

logger = logging.getLogger(__name__)


class AccountStore:
    def __init__(
        self, repository: AccountRepository, timeout_seconds: float | None = None,
    ):
        self._repository = repository
        self._timeout = timeout_seconds

    async def create(self, email: object, password: object) -> Account:
        """Persist a new account. Raises DuplicateEmailError if the email is taken."""
        email = require_non_empty_str(email, "email")
        password = require_non_empty_str(password, "password")
        account = await call_with_timeout(
            self._repository.insert(email, password),
            "account.create", self._timeout,
        )
        logger.info("Account created", extra={"account_id": account.id})
        return account

    async def get_by_id(self, account_id: object) -> Account:
        account_id = AccountId(require_identifier(account_id, "account_id"))
        if not is_storable_identifier(account_id):
            raise NotFoundError("Account", account_id)
        account = await call_with_timeout(
            self._repository.get_by_id(account_id),
            "account.get_by_id", self._timeout,
        )
        if account is None:
            raise NotFoundError("Account", account_id)
        return account
