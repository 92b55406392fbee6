"""Sessions — exchange credentials for a session id and token.

Invariants:
    - POST /api/sessions → 200 {sessionId, token}; 401 on any credential mismatch
"""

from fastapi import APIRouter, Depends, status

from fincalc.api.deps import get_session_service
from fincalc.schemas.account import SessionCreate, SessionResponse
from fincalc.services.session_service import SessionService

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post(
    "", response_model=SessionResponse, status_code=status.HTTP_200_OK,
)
async def create_session(
    body: SessionCreate, service: SessionService = Depends(get_session_service),
):
    grant = await service.create_session(body.email, body.password)
    return SessionResponse(session_id=grant.session_id, token=grant.token)
