"""Tests for startup backend selection."""
import pytest

from filmlist.core.backend import build_backend
from filmlist.core.local_store import LocalFilmStore
from filmlist.core.sheet_client import SheetClient


def test_build_sheet_backend():
    assert isinstance(build_backend("sheet", sheet_url="https://script.example.com/exec"), SheetClient)


def test_build_local_backend(store_path):
    assert isinstance(build_backend("local", local_path=store_path), LocalFilmStore)


def test_build_unknown_backend():
    with pytest.raises(ValueError):
        build_backend("postgres")
