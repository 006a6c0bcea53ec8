"""Film CRUD over the active backend, plus the displayed projection and counters."""
import datetime
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field, field_validator

from filmlist.api.state import AppState, get_state
from filmlist.core.catalog import Notice
from filmlist.core.errors import NotFoundError, ParseError, RemoteError
from filmlist.models.film import STATUSES, Film

router = APIRouter()


class FilmBody(BaseModel):
    title: str
    type: str
    episodes: Optional[int] = Field(default=None, ge=0)
    status: str
    date: Optional[datetime.date] = None
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator("status")
    @classmethod
    def _known_status(cls, v: str) -> str:
        if v not in STATUSES:
            raise ValueError(f"status must be one of {', '.join(STATUSES)}")
        return v

    def to_film(self, film_id: Optional[int] = None) -> Film:
        return Film(
            id=film_id,
            title=self.title,
            type=self.type,
            episodes=self.episodes,
            status=self.status,
            date=self.date.isoformat() if self.date else None,
            notes=(self.notes or "").strip(),
        )


def film_to_dict(f: Film) -> dict:
    return asdict(f)


def raise_for_notice(notice: Notice) -> None:
    """Turn an error notice into the matching HTTP error."""
    if notice.ok:
        return
    if isinstance(notice.error, NotFoundError):
        status_code = 404
    elif isinstance(notice.error, (RemoteError, ParseError)):
        status_code = 502
    else:
        # StorageError and anything unexpected
        status_code = 500
    raise HTTPException(status_code=status_code, detail=notice.message)


@router.get("/")
def list_films(state: AppState = Depends(get_state)):
    """Current projection (filtered and sorted by the view state)."""
    return [film_to_dict(f) for f in state.catalog.projection]


@router.get("/stats")
def film_stats(state: AppState = Depends(get_state)):
    """Totals over the full catalog, ignoring filters."""
    return asdict(state.catalog.stats())


@router.post("/reload")
async def reload_films(state: AppState = Depends(get_state)):
    """Reload from the backend. Falls back to sample films if the backend fails."""
    notice = await state.catalog.load()
    return {
        "ok": notice.ok,
        "message": notice.message,
        "count": len(state.catalog.films),
    }


@router.get("/{film_id}")
def get_film(film_id: int, state: AppState = Depends(get_state)):
    film = state.catalog.get(film_id)
    if film is None:
        raise HTTPException(status_code=404, detail="Film not found")
    return film_to_dict(film)


@router.post("/", status_code=201)
async def create_film(body: FilmBody, state: AppState = Depends(get_state)):
    notice = await state.catalog.create(body.to_film())
    raise_for_notice(notice)
    return {"ok": True, "message": notice.message}


@router.put("/{film_id}")
async def update_film(film_id: int, body: FilmBody, state: AppState = Depends(get_state)):
    """Replace every field of the film; the spreadsheet row handle is kept."""
    notice = await state.catalog.update(body.to_film(film_id))
    raise_for_notice(notice)
    return film_to_dict(state.catalog.get(film_id) or body.to_film(film_id))


@router.delete("/{film_id}", status_code=204)
async def delete_film(film_id: int, state: AppState = Depends(get_state)):
    notice = await state.catalog.remove(film_id)
    raise_for_notice(notice)
    return Response(status_code=204)
