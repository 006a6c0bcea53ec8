"""Translate between spreadsheet rows (no/judul/episode/...) and Film."""
import re
from typing import Any, Iterable, List

from filmlist.models.film import Film

_INT_TEXT = re.compile(r"-?[0-9]+")


def _as_int(value: Any) -> Any:
    """Coerce numeric text from the sheet to int; leave anything else alone."""
    if isinstance(value, str) and _INT_TEXT.fullmatch(value.strip()):
        return int(value.strip())
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _or_none(value: Any) -> Any:
    return None if value is None or value == "" else value


def _text(value: Any) -> str:
    # Sheets hand back numeric-looking cells (a title like 1984) as numbers
    return "" if value is None else str(value)


def to_internal(item: dict) -> Film:
    """Map one sheet row to a Film. Missing fields get defaults, never raise."""
    return Film(
        id=_as_int(_or_none(item.get("no"))),
        title=_text(item.get("judul")),
        type=_text(item.get("type")),
        episodes=_as_int(_or_none(item.get("episode"))),
        status=_text(item.get("status")),
        date=_or_none(item.get("date")),
        notes=_text(item.get("notes")),
        row_index=item.get("rowIndex"),
    )


def to_internal_many(items: Iterable[dict]) -> List[Film]:
    return [to_internal(item) for item in items]


def to_remote(film: Film) -> dict:
    """Map a Film to a sheet row. rowIndex is carried for edit/delete targeting."""
    data = {
        "judul": film.title,
        "type": film.type,
        "episode": film.episodes,
        "status": film.status,
        "date": film.date,
        "notes": film.notes,
        "rowIndex": film.row_index,
    }
    if film.id is not None:
        data["no"] = film.id
    return data
