"""Film record, watch statuses, and aggregate counters."""
from dataclasses import dataclass
from typing import Any, Optional

STATUS_COMPLETED = "Selesai"
STATUS_WATCHING = "Sedang Ditonton"
STATUS_PLANNED = "Rencana"
STATUS_ON_HOLD = "Ditunda"
STATUSES = (STATUS_COMPLETED, STATUS_WATCHING, STATUS_PLANNED, STATUS_ON_HOLD)

# Categories offered by the form; stored type is free text
TYPES = ("Donghua", "Anime", "Film", "Series")

SORTABLE_COLUMNS = ("id", "title", "type", "episodes", "status", "date", "notes")


@dataclass
class Film:
    """One catalog entry. id is None only on an unsaved draft."""
    id: Optional[int]
    title: str
    type: str
    episodes: Optional[int] = None
    status: str = ""
    date: Optional[str] = None  # ISO 8601 date
    notes: str = ""
    row_index: Any = None  # spreadsheet row handle; unused by the local store


@dataclass
class CatalogStats:
    total: int
    completed: int
    watching: int
    planned: int
