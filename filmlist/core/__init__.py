"""Core: field mapping, backends, catalog store, filter/sort."""
from filmlist.core.backend import FilmBackend, build_backend
from filmlist.core.catalog import CatalogStore, Notice

__all__ = ["CatalogStore", "FilmBackend", "Notice", "build_backend"]
