"""Catalog store: full film set, displayed projection, and user notices."""
import asyncio
import logging
from collections import deque
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Deque, List, Optional

from filmlist.config import MAX_NOTICES
from filmlist.core.backend import FilmBackend
from filmlist.core.errors import CatalogError, NotFoundError
from filmlist.core.view import ViewState
from filmlist.models.film import (
    STATUS_COMPLETED,
    STATUS_PLANNED,
    STATUS_WATCHING,
    CatalogStats,
    Film,
)
from filmlist.models.sample import sample_films

logger = logging.getLogger(__name__)


@dataclass
class Notice:
    """User-visible outcome of a load or write (the UI shows it as a toast)."""
    level: str  # "success" | "error"
    message: str
    created_at: str
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.level == "success"


class CatalogStore:
    """Owns the film list and its projection; all writes go through the backend.

    After every successful write the whole set is reloaded from the backend
    instead of being patched locally, so the store never drifts from the
    source of truth (spreadsheet row indices shift after a delete, for one).
    Failures never propagate: they are logged and recorded as notices.
    """

    def __init__(self, backend: FilmBackend, view: Optional[ViewState] = None) -> None:
        self.backend = backend
        self.view = view or ViewState()
        self.films: List[Film] = []
        self.projection: List[Film] = []
        self.notices: Deque[Notice] = deque(maxlen=MAX_NOTICES)
        # Overlapping loads apply in the order they were issued
        self._load_lock = asyncio.Lock()

    def _notify(self, level: str, message: str, error: Optional[CatalogError] = None) -> Notice:
        notice = Notice(
            level=level,
            message=message,
            created_at=datetime.now(timezone.utc).isoformat(),
            error=error,
        )
        self.notices.append(notice)
        return notice

    def refresh(self) -> None:
        """Recompute the projection from the full set and current view."""
        self.projection = self.view.apply(self.films)

    async def load(self) -> Notice:
        """Replace the full set from the backend; fall back to sample films on failure."""
        async with self._load_lock:
            try:
                films = await self.backend.read()
            except CatalogError as e:
                logger.error("Error loading data: %s", e)
                self.films = sample_films()
                self.projection = list(self.films)
                self.refresh()
                return self._notify("error", f"Failed to load data: {e}", e)
            self.films = films
            self.projection = list(films)
            self.refresh()
            logger.info("Loaded %d films", len(films))
            return self._notify("success", f"Loaded {len(films)} films")

    async def _write(self, action: str, success_message: str, fail_prefix: str, film: Film) -> Notice:
        try:
            await getattr(self.backend, action)(film)
        except CatalogError as e:
            logger.error("Error in %s for film %s: %s", action, film.id, e)
            return self._notify("error", f"{fail_prefix}: {e}", e)
        await self.load()
        return self._notify("success", success_message)

    def get(self, film_id: int) -> Optional[Film]:
        for f in self.films:
            if f.id == film_id:
                return f
        return None

    async def create(self, draft: Film) -> Notice:
        return await self._write(
            "add", "Film added", "Failed to save data", replace(draft, id=None, row_index=None)
        )

    async def update(self, draft: Film) -> Notice:
        """Full replacement of the film with draft.id; keeps its row handle."""
        existing = self.get(draft.id)
        if existing is None:
            err = NotFoundError(f"Film {draft.id} not found")
            logger.error("Error updating film: %s", err)
            return self._notify("error", f"Failed to save data: {err}", err)
        if draft.row_index is None:
            draft = replace(draft, row_index=existing.row_index)
        return await self._write("edit", "Film updated", "Failed to save data", draft)

    async def remove(self, film_id: int) -> Notice:
        existing = self.get(film_id)
        if existing is None:
            err = NotFoundError(f"Film {film_id} not found")
            logger.error("Error deleting film: %s", err)
            return self._notify("error", f"Failed to delete data: {err}", err)
        return await self._write("delete", "Film deleted", "Failed to delete data", existing)

    def set_filters(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        type_: Optional[str] = None,
    ) -> None:
        self.view.search = search or ""
        self.view.status = status or None
        self.view.type = type_ or None
        self.refresh()

    def toggle_sort(self, column: str) -> None:
        self.view.toggle_sort(column)
        self.refresh()

    def stats(self) -> CatalogStats:
        return CatalogStats(
            total=len(self.films),
            completed=sum(1 for f in self.films if f.status == STATUS_COMPLETED),
            watching=sum(1 for f in self.films if f.status == STATUS_WATCHING),
            planned=sum(1 for f in self.films if f.status == STATUS_PLANNED),
        )
