"""Tests for CatalogStore load/write/reload behavior."""
import asyncio

import httpx
import pytest

from filmlist.core.catalog import CatalogStore
from filmlist.core.errors import NotFoundError, RemoteError, StorageError
from filmlist.core.local_store import LocalFilmStore
from filmlist.core.sheet_client import SheetClient
from filmlist.models.film import Film

from tests.conftest import FakeBackend


def _ids(films):
    return [f.id for f in films]


@pytest.mark.asyncio
async def test_load_replaces_full_set_and_projection(fake_backend):
    store = CatalogStore(fake_backend)
    notice = await store.load()
    assert notice.ok
    assert _ids(store.films) == list(range(1, 9))
    assert _ids(store.projection) == list(range(1, 9))


@pytest.mark.asyncio
async def test_load_failure_falls_back_to_sample():
    backend = FakeBackend([Film(1, "Only", "Film")])
    backend.fail_read = RemoteError("Sheet locked")
    store = CatalogStore(backend)
    notice = await store.load()
    assert not notice.ok
    assert "Sheet locked" in notice.message
    assert isinstance(notice.error, RemoteError)
    assert len(store.films) == 8
    assert store.notices[-1] is notice


@pytest.mark.asyncio
async def test_load_applies_current_view(fake_backend):
    store = CatalogStore(fake_backend)
    store.set_filters(status="Selesai")
    await store.load()
    assert _ids(store.projection) == [2, 3, 4, 5]
    assert len(store.films) == 8


@pytest.mark.asyncio
async def test_create_reloads_after_ack(fake_backend):
    store = CatalogStore(fake_backend)
    await store.load()
    notice = await store.create(Film(None, "Renegade Immortal", "Donghua", 100, "Rencana"))
    assert notice.ok
    assert [c[0] for c in fake_backend.calls] == ["read", "add", "read"]
    assert store.get(9).title == "Renegade Immortal"


@pytest.mark.asyncio
async def test_create_strips_id_and_row_handle(fake_backend):
    store = CatalogStore(fake_backend)
    await store.create(Film(77, "X", "Film", row_index=12))
    sent = fake_backend.calls[0][1]
    assert sent.id is None
    assert sent.row_index is None


@pytest.mark.asyncio
async def test_write_failure_leaves_state_untouched(fake_backend):
    store = CatalogStore(fake_backend)
    await store.load()
    before_films, before_projection = list(store.films), list(store.projection)
    fake_backend.fail_write = StorageError("disk full")
    notice = await store.create(Film(None, "X", "Film"))
    assert not notice.ok
    assert "disk full" in notice.message
    assert store.films == before_films
    assert store.projection == before_projection
    assert [c[0] for c in fake_backend.calls] == ["read", "add"]


@pytest.mark.asyncio
async def test_update_carries_stored_row_index():
    backend = FakeBackend([Film(1, "A", "Film", row_index=2), Film(2, "B", "Film", row_index=3)])
    store = CatalogStore(backend)
    await store.load()
    notice = await store.update(Film(2, "B2", "Anime", status="Selesai"))
    assert notice.ok
    sent = [c[1] for c in backend.calls if c[0] == "edit"][0]
    assert sent.row_index == 3
    assert store.get(2).title == "B2"


@pytest.mark.asyncio
async def test_update_unknown_id(fake_backend):
    store = CatalogStore(fake_backend)
    await store.load()
    notice = await store.update(Film(99, "Ghost", "Film"))
    assert isinstance(notice.error, NotFoundError)
    assert "edit" not in [c[0] for c in fake_backend.calls]


@pytest.mark.asyncio
async def test_remove_reloads(fake_backend):
    store = CatalogStore(fake_backend)
    await store.load()
    notice = await store.remove(5)
    assert notice.ok
    assert 5 not in _ids(store.films)
    assert [c[0] for c in fake_backend.calls] == ["read", "delete", "read"]


@pytest.mark.asyncio
async def test_remove_unknown_id_skips_backend(fake_backend):
    store = CatalogStore(fake_backend)
    await store.load()
    notice = await store.remove(42)
    assert isinstance(notice.error, NotFoundError)
    assert [c[0] for c in fake_backend.calls] == ["read"]


@pytest.mark.asyncio
async def test_local_create_on_empty_set(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text('{"filmData": []}')
    store = CatalogStore(LocalFilmStore(store_path))
    await store.load()
    assert store.films == []
    await store.create(Film(None, "First", "Anime", status="Rencana"))
    await store.create(Film(None, "Second", "Anime", status="Rencana"))
    assert _ids(store.films) == [1, 2]


@pytest.mark.asyncio
async def test_overlapping_loads_apply_in_issue_order():
    class SlowFirstBackend(FakeBackend):
        def __init__(self):
            super().__init__()
            self.generation = 0

        async def read(self):
            self.generation += 1
            gen = self.generation
            if gen == 1:
                await asyncio.sleep(0.05)
            return [Film(gen, f"gen {gen}", "Film")]

    store = CatalogStore(SlowFirstBackend())
    await asyncio.gather(store.load(), store.load())
    assert store.films[0].title == "gen 2"


def test_toggle_sort_recomputes(films):
    store = CatalogStore(FakeBackend())
    store.films = films
    store.toggle_sort("id")
    assert _ids(store.projection) == list(range(8, 0, -1))
    store.toggle_sort("date")
    assert store.projection[-1].id == 7


def test_stats_count_full_set(films):
    store = CatalogStore(FakeBackend())
    store.films = films
    store.set_filters(type_="Film")
    stats = store.stats()
    assert (stats.total, stats.completed, stats.watching, stats.planned) == (8, 4, 2, 1)


@pytest.mark.asyncio
async def test_corrupt_local_id_becomes_error_notice(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text('{"filmData": [{"id": "3", "title": "A"}, {"id": 1, "title": "B"}]}')
    store = CatalogStore(LocalFilmStore(store_path))
    notice = await store.create(Film(None, "C", "Film"))
    assert not notice.ok
    assert isinstance(notice.error, StorageError)


@pytest.mark.asyncio
async def test_numeric_sheet_title_is_searchable():
    rows = [
        {"no": 1, "judul": 1984, "type": "Film", "episode": 1, "status": "Selesai", "rowIndex": 2},
        {"no": 2, "judul": "Soul Land", "type": "Donghua", "episode": "--", "status": "Rencana", "rowIndex": 3},
    ]
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, json={"status": "success", "data": rows})
    )
    store = CatalogStore(SheetClient("https://script.example.com/exec", transport=transport))
    store.set_filters(search="19")
    notice = await store.load()
    assert notice.ok
    assert _ids(store.projection) == [1]
    store.set_filters(search="soul")
    assert _ids(store.projection) == [2]
