"""Orden de items y grupos por día.

Los grupos se titulan como "Fri Sep 01". La clave de orden es un día de dos
dígitos: el `day` explícito cuando el documento de boards lo conoce, si no los
dos últimos caracteres de un título de 10 caracteres. Lo que no tiene ninguno
va al final.

Nota:
- `compare_group_titles` conserva el comparador de títulos (sufijo del día y
  luego el título completo) para quien compare títulos directamente.
"""

from __future__ import annotations

from core.domain.models import BoardItem, GroupSummary

_DAY_TITLE_LENGTH = 10


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _title_day(title: str) -> str | None:
    if len(title) != _DAY_TITLE_LENGTH:
        return None
    return title[8:10]


def compare_group_titles(a_title: str, b_title: str) -> int:
    """Compare two group titles by their day suffix, falling back to the whole title."""

    a_day, b_day = _title_day(a_title), _title_day(b_title)
    if a_day is not None and b_day is not None and a_day != b_day:
        return _cmp(a_day, b_day)
    return _cmp(a_title, b_title)


def day_key(day: int | None, title: str) -> tuple[bool, str]:
    """Sort key shared by items and summaries; unknown days go last."""

    text = f"{day:02d}" if day is not None else _title_day(title)
    return (text is None, text or "")


def sort_items(items: list[BoardItem]) -> list[BoardItem]:
    return sorted(items, key=lambda item: (*day_key(item.day, item.group.title), item.id))


def sort_summaries(groups: list[GroupSummary]) -> list[GroupSummary]:
    return sorted(groups, key=lambda g: (*day_key(g.day, g.group), g.group))
