"""User Accounts — create and fetch accounts.

Invariants:
    - POST /api/users → 201 {userId, email, createdAt}; 409 duplicate email; 400 invalid input
    - GET /api/users/{userId} → 200 {id, email, createdAt}; 404 unknown id
    - Password is never echoed back
"""

import logging

from fastapi import APIRouter, Depends, status

from fincalc.api.deps import get_account_store
from fincalc.schemas.account import AccountCreate, AccountCreated, AccountResponse
from fincalc.services.account_store import AccountStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=AccountCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: AccountCreate, store: AccountStore = Depends(get_account_store),
):
    """Create an account."""
    account = await store.create(body.email, body.password)
    return AccountCreated(
        user_id=account.id, email=account.email, created_at=account.created_at,
    )


@router.get("/{user_id}", response_model=AccountResponse)
async def get_user(
    user_id: int, store: AccountStore = Depends(get_account_store),
):
    """Get an account by id."""
    account = await store.get_by_id(user_id)
    return AccountResponse(
        id=account.id, email=account.email, created_at=account.created_at,
    )
