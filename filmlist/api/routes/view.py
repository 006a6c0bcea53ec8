"""Search, filter and sort state for the displayed table."""
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from filmlist.api.state import AppState, get_state
from filmlist.api.routes.films import film_to_dict

router = APIRouter()


class FiltersBody(BaseModel):
    search: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


def _view_response(state: AppState) -> dict:
    return {
        "view": asdict(state.catalog.view),
        "films": [film_to_dict(f) for f in state.catalog.projection],
    }


@router.get("/")
def get_view(state: AppState = Depends(get_state)):
    return _view_response(state)


@router.put("/filters")
def set_filters(body: FiltersBody, state: AppState = Depends(get_state)):
    """Set search text and status/type filters. Empty or null clears one."""
    state.catalog.set_filters(search=body.search, status=body.status, type_=body.type)
    return _view_response(state)


@router.post("/sort/{column}")
def toggle_sort(column: str, state: AppState = Depends(get_state)):
    """Sort by column; repeating the same column flips the direction."""
    try:
        state.catalog.toggle_sort(column)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _view_response(state)
