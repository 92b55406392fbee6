"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - AccountRepository.insert enforces email uniqueness atomically at write time
      and raises DuplicateEmailError itself; callers never pre-check

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never are
"""

from typing import Protocol

from fincalc.core.domain_types import AccountId
from fincalc.core.records import Account, FinancialProfile, SessionGrant


class AccountRepository(Protocol):
    """Contract for account persistence — implemented by shell."""
    async def insert(self, email: str, password: str) -> Account: ...
    async def get_by_id(self, account_id: AccountId) -> Account | None: ...
    async def get_by_email(self, email: str) -> Account | None: ...


class FinancialProfileRepository(Protocol):
    """Contract for financial profile persistence — implemented by shell."""
    async def insert(
        self, user_id: int, values: dict[str, float | None],
    ) -> FinancialProfile: ...
    async def list_by_user(self, user_id: int) -> list[FinancialProfile]: ...


class CredentialVerifier(Protocol):
    """Decides whether a presented password matches the stored one."""
    def verify(self, presented: str, stored: str) -> bool: ...


class TokenIssuer(Protocol):
    """Issues a session identifier and token for an authenticated account."""
    def issue(self, account: Account) -> SessionGrant: ...
