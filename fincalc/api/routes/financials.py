"""Financial Profiles — record and list calculator inputs per user.

Invariants:
    - POST /api/financials → 201 {dataId, userId, createdAt}; 400 on non-numeric fields
    - GET /api/financials/{userId} → 200 {records: [...]}, empty list for unknown users
    - userId is not checked against existing accounts
"""

from fastapi import APIRouter, Depends, status

from fincalc.api.deps import get_profile_store
from fincalc.schemas.financial import (
    FinancialCreate, FinancialCreated, FinancialFields, FinancialRecord,
    FinancialRecordList,
)
from fincalc.services.profile_store import FinancialProfileStore

router = APIRouter(prefix="/api/financials", tags=["financials"])


@router.post(
    "", response_model=FinancialCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_financials(
    body: FinancialCreate,
    store: FinancialProfileStore = Depends(get_profile_store),
):
    """Store one financial profile row."""
    fields = body.model_dump(include=set(FinancialFields.model_fields))
    profile = await store.create(body.user_id, **fields)
    return FinancialCreated(
        data_id=profile.id, user_id=profile.user_id,
        created_at=profile.created_at,
    )


@router.get("/{user_id}", response_model=FinancialRecordList)
async def list_financials(
    user_id: int, store: FinancialProfileStore = Depends(get_profile_store),
):
    """List a user's profiles in creation order."""
    profiles = await store.list_by_user(user_id)
    return FinancialRecordList(
        records=[FinancialRecord.from_profile(p) for p in profiles],
    )
