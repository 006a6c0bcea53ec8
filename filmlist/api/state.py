"""Shared application state (injected into routes)."""
from filmlist.core.backend import FilmBackend, build_backend
from filmlist.core.catalog import CatalogStore


class AppState:
    def __init__(self, backend: FilmBackend | None = None) -> None:
        self.backend = backend if backend is not None else build_backend()
        self.catalog = CatalogStore(self.backend)

    async def startup(self) -> None:
        await self.catalog.load()

    async def shutdown(self) -> None:
        await self.backend.aclose()


_state: AppState | None = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state


def set_state(state: AppState | None) -> None:
    """Replace the shared state (tests, alternate entry points)."""
    global _state
    _state = state
