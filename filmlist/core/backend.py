"""Backend interface shared by the spreadsheet and local stores, and startup selection."""
import logging
from pathlib import Path
from typing import List, Optional, Protocol

from filmlist.config import BACKEND, HTTP_TIMEOUT_SEC, LOCAL_STORE_PATH, SHEET_API_URL
from filmlist.core.local_store import LocalFilmStore
from filmlist.core.sheet_client import SheetClient
from filmlist.models.film import Film

logger = logging.getLogger(__name__)


class FilmBackend(Protocol):
    async def read(self) -> List[Film]: ...

    async def add(self, film: Film) -> dict: ...

    async def edit(self, film: Film) -> dict: ...

    async def delete(self, film: Film) -> dict: ...

    async def aclose(self) -> None: ...


def build_backend(
    kind: str = BACKEND,
    *,
    sheet_url: str = SHEET_API_URL,
    local_path: Optional[Path] = None,
    timeout: float = HTTP_TIMEOUT_SEC,
) -> FilmBackend:
    """Return the backend named by kind ('sheet' or 'local')."""
    if kind == "sheet":
        logger.info("Using spreadsheet backend")
        return SheetClient(sheet_url, timeout=timeout)
    if kind == "local":
        path = local_path or LOCAL_STORE_PATH
        logger.info("Using local backend at %s", path)
        return LocalFilmStore(path)
    raise ValueError(f"Unknown backend {kind!r} (expected 'sheet' or 'local')")
