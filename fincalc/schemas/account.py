"""Account & Session Schemas — request/response shapes for /api/users and /api/sessions.

Invariants:
    - Password never appears in any response model
    - Emptiness of email/password is checked by the stores, not here, so the
      error shape matches other ValidationErrors
"""

from datetime import datetime

from fincalc.schemas.base import CamelModel


class AccountCreate(CamelModel):
    email: str
    password: str


class AccountCreated(CamelModel):
    user_id: int
    email: str
    created_at: datetime


class AccountResponse(CamelModel):
    id: int
    email: str
    created_at: datetime


class SessionCreate(CamelModel):
    email: str
    password: str


class SessionResponse(CamelModel):
    session_id: str
    token: str
