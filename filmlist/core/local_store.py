"""Local backend: persist the catalog as JSON on disk (offline/test mode)."""
import asyncio
import json
import logging
import os
from dataclasses import asdict, replace
from pathlib import Path
from typing import List

from filmlist.config import LOCAL_STORE_KEY, LOCAL_STORE_PATH
from filmlist.core.errors import NotFoundError, StorageError
from filmlist.models.film import Film
from filmlist.models.sample import sample_films

logger = logging.getLogger(__name__)

_OK = {"status": "success"}


def _text(value) -> str:
    return "" if value is None else str(value)


def _film_from_dict(item: dict) -> Film:
    film_id = item["id"]
    if not isinstance(film_id, int) or isinstance(film_id, bool):
        raise StorageError(f"Corrupt film store: id {film_id!r} is not an integer")
    return Film(
        id=film_id,
        title=_text(item.get("title")),
        type=_text(item.get("type")),
        episodes=item.get("episodes"),
        status=_text(item.get("status")),
        date=item.get("date"),
        notes=_text(item.get("notes")),
    )


def _film_to_dict(film: Film) -> dict:
    data = asdict(film)
    data.pop("row_index")
    return data


class LocalFilmStore:
    """Same operations as SheetClient, backed by a single JSON file.

    The file holds ``{"filmData": [...]}``. A missing file is seeded with the
    sample catalog on first read.
    """

    def __init__(self, path: Path = LOCAL_STORE_PATH) -> None:
        self._path = Path(path)
        # Each operation is read-modify-write on the whole file
        self._lock = asyncio.Lock()

    def _load(self) -> List[Film]:
        if not self._path.exists():
            films = sample_films()
            self._save(films)
            logger.info("Seeded %s with %d sample films", self._path, len(films))
            return films
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return [_film_from_dict(item) for item in data[LOCAL_STORE_KEY]]
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e
        except (KeyError, TypeError) as e:
            raise StorageError(f"Corrupt film store {self._path}") from e

    def _save(self, films: List[Film]) -> None:
        data = {LOCAL_STORE_KEY: [_film_to_dict(f) for f in films]}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_name(self._path.name + ".tmp")
            tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

    def _add(self, film: Film) -> Film:
        films = self._load()
        new_id = max(f.id for f in films) + 1 if films else 1
        stored = replace(film, id=new_id, row_index=None)
        films.append(stored)
        self._save(films)
        return stored

    def _edit(self, film: Film) -> Film:
        films = self._load()
        for i, f in enumerate(films):
            if f.id == film.id:
                films[i] = replace(film, row_index=None)
                self._save(films)
                return films[i]
        raise NotFoundError(f"Film {film.id} not found")

    def _delete(self, film: Film) -> None:
        films = self._load()
        self._save([f for f in films if f.id != film.id])

    async def read(self) -> List[Film]:
        async with self._lock:
            return await asyncio.to_thread(self._load)

    async def add(self, film: Film) -> dict:
        async with self._lock:
            stored = await asyncio.to_thread(self._add, film)
        logger.info("Added film %d (%s)", stored.id, stored.title)
        return {**_OK, "data": _film_to_dict(stored)}

    async def edit(self, film: Film) -> dict:
        async with self._lock:
            await asyncio.to_thread(self._edit, film)
        logger.info("Updated film %s", film.id)
        return dict(_OK)

    async def delete(self, film: Film) -> dict:
        async with self._lock:
            await asyncio.to_thread(self._delete, film)
        logger.info("Deleted film %s", film.id)
        return dict(_OK)

    async def aclose(self) -> None:
        pass
