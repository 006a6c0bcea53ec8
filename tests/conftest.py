"""Shared test fixtures for filmlist."""
from pathlib import Path
from typing import List

import pytest

from filmlist.core.errors import CatalogError
from filmlist.models.film import Film
from filmlist.models.sample import sample_films


class FakeBackend:
    """In-memory backend recording calls; set fail_* to make an operation raise."""

    def __init__(self, films: List[Film] | None = None) -> None:
        self.films = list(films or [])
        self.calls: list[tuple[str, object]] = []
        self.fail_read: CatalogError | None = None
        self.fail_write: CatalogError | None = None

    async def read(self) -> List[Film]:
        self.calls.append(("read", None))
        if self.fail_read:
            raise self.fail_read
        return list(self.films)

    async def add(self, film: Film) -> dict:
        self.calls.append(("add", film))
        if self.fail_write:
            raise self.fail_write
        new_id = max((f.id for f in self.films), default=0) + 1
        self.films.append(Film(**{**film.__dict__, "id": new_id}))
        return {"status": "success"}

    async def edit(self, film: Film) -> dict:
        self.calls.append(("edit", film))
        if self.fail_write:
            raise self.fail_write
        self.films = [film if f.id == film.id else f for f in self.films]
        return {"status": "success"}

    async def delete(self, film: Film) -> dict:
        self.calls.append(("delete", film))
        if self.fail_write:
            raise self.fail_write
        self.films = [f for f in self.films if f.id != film.id]
        return {"status": "success"}

    async def aclose(self) -> None:
        self.calls.append(("aclose", None))


@pytest.fixture
def films() -> List[Film]:
    return sample_films()


@pytest.fixture
def fake_backend(films: List[Film]) -> FakeBackend:
    return FakeBackend(films)


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "film_data.json"
