"""Recent load/write outcomes for the UI to show as toasts."""
from fastapi import APIRouter, Depends

from filmlist.api.state import AppState, get_state

router = APIRouter()


@router.get("/")
def list_notices(state: AppState = Depends(get_state)):
    """Notices oldest first."""
    return [
        {"level": n.level, "message": n.message, "created_at": n.created_at}
        for n in state.catalog.notices
    ]
