"""Session endpoint for the admin console."""

from fastapi import APIRouter, Depends

from civicview.api.dependencies import get_current_admin
from civicview.entities import UserRecord
from civicview.schemas import SessionResponse, SessionUser

router = APIRouter()


@router.get("/session", response_model=SessionResponse)
async def get_session(admin: UserRecord = Depends(get_current_admin)):
    """Return the authenticated administrator."""
    return SessionResponse(
        user=SessionUser(id=admin.id, username=admin.username, is_admin=admin.is_admin)
    )
