"""Credential Adapters — default CredentialVerifier and TokenIssuer implementations.

Invariants:
    - Password comparison is constant-time (hmac.compare_digest)
    - Every issued session id and token is freshly generated (never a fixed value)

Design Decisions:
    - Passwords are stored as given; a hashing verifier can replace
      PlaintextCredentialVerifier without touching SessionService
    - Tokens are opaque random strings, not JWTs: nothing in this service validates them yet
"""

import hmac
import secrets
import uuid

from fincalc.core.records import Account, SessionGrant


class PlaintextCredentialVerifier:
    def verify(self, presented: str, stored: str) -> bool:
        return hmac.compare_digest(presented.encode(), stored.encode())


class OpaqueTokenIssuer:
    def __init__(self, token_bytes: int = 32):
        self._token_bytes = token_bytes

    def issue(self, account: Account) -> SessionGrant:
        return SessionGrant(
            session_id=str(uuid.uuid4()),
            token=secrets.token_urlsafe(self._token_bytes),
        )
