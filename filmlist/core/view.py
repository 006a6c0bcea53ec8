"""Search/filter/sort of the catalog into the displayed projection."""
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from filmlist.models.film import SORTABLE_COLUMNS, Film

ASC = "asc"
DESC = "desc"


def matches(
    film: Film,
    search: str = "",
    status: Optional[str] = None,
    type_: Optional[str] = None,
) -> bool:
    """True if film passes every active filter. Empty/None means match all."""
    if search:
        term = search.lower()
        if not (
            term in film.title.lower()
            or term in film.type.lower()
            or term in film.status.lower()
        ):
            return False
    if status and film.status != status:
        return False
    if type_ and film.type != type_:
        return False
    return True


def _sort_key(value: Any) -> tuple:
    # Sheets can hand back numbers as text; keep mixed columns comparable
    if isinstance(value, str):
        return (1, value.lower())
    return (0, value)


def sort_films(films: Sequence[Film], column: str, direction: str = ASC) -> List[Film]:
    """Stable sort by column. Films with a None value go last in either direction."""
    if column not in SORTABLE_COLUMNS:
        raise ValueError(f"Cannot sort by {column!r}")
    present = [f for f in films if getattr(f, column) is not None]
    missing = [f for f in films if getattr(f, column) is None]
    present.sort(key=lambda f: _sort_key(getattr(f, column)), reverse=direction == DESC)
    return present + missing


def project(
    films: Sequence[Film],
    search: str = "",
    status: Optional[str] = None,
    type_: Optional[str] = None,
    sort_column: Optional[str] = None,
    sort_direction: str = ASC,
) -> List[Film]:
    """Filtered and sorted copy of films. sort_column None keeps input order."""
    selected = [f for f in films if matches(f, search, status, type_)]
    if sort_column is None:
        return selected
    return sort_films(selected, sort_column, sort_direction)


@dataclass
class ViewState:
    search: str = ""
    status: Optional[str] = None
    type: Optional[str] = None
    sort_column: Optional[str] = "id"
    sort_direction: str = ASC

    def toggle_sort(self, column: str) -> None:
        """Same column flips direction; a new column starts ascending."""
        if column not in SORTABLE_COLUMNS:
            raise ValueError(f"Cannot sort by {column!r}")
        if column == self.sort_column:
            self.sort_direction = DESC if self.sort_direction == ASC else ASC
        else:
            self.sort_column = column
            self.sort_direction = ASC

    def apply(self, films: Sequence[Film]) -> List[Film]:
        return project(
            films,
            search=self.search,
            status=self.status,
            type_=self.type,
            sort_column=self.sort_column,
            sort_direction=self.sort_direction,
        )
