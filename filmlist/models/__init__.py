"""Data models for films and catalog counters."""
from filmlist.models.film import CatalogStats, Film
from filmlist.models.sample import sample_films

__all__ = [
    "CatalogStats",
    "Film",
    "sample_films",
]
