"""Resolución fecha -> identificadores del board.

Búsquedas puras sobre un `BoardsConf` ya cargado. Cada fallo es un error de
validación, sin reintentos ni valores por defecto.
"""

from __future__ import annotations

import re

from core.domain.models import BoardsConf, MonthEntry
from core.errors import validation_error

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MSG_MONTH_BOARD_ID_NOT_FOUND = '"months.{month}.board_id": not found in boards configuration. Exiting.'
MSG_DAY_GROUP_NOT_FOUND = '"months.{month}.days.{day}": not found in boards configuration. Exiting.'


def split_date(date: str) -> tuple[str, str]:
    """Split `yyyy-mm-dd` into (`yyyy-mm`, `dd`)."""

    if len(date) != 10 or not _DATE_RE.match(date):
        raise validation_error(
            f"day = {date} (first arg): provided day is not in format yyyy-mm-dd. Exiting."
        )
    return date[0:7], date[8:10]


def resolve_month(boards_conf: BoardsConf, month: str) -> MonthEntry:
    entry = boards_conf.months.get(month)
    if entry is None or not entry.board_id:
        raise validation_error(MSG_MONTH_BOARD_ID_NOT_FOUND.format(month=month))
    return entry


def resolve_board_id(boards_conf: BoardsConf, month: str) -> str:
    return resolve_month(boards_conf, month).board_id


def resolve_group_id(boards_conf: BoardsConf, month: str, day: str) -> str:
    entry = resolve_month(boards_conf, month)
    group_id = entry.days.get(day)
    if not group_id:
        raise validation_error(MSG_DAY_GROUP_NOT_FOUND.format(month=month, day=day))
    return group_id


def parse_board_id(board_id: str, month: str) -> int:
    try:
        return int(board_id)
    except ValueError as exc:
        raise validation_error(f'"months.{month}.board_id": not a number. Exiting.', exc) from exc


def day_lookup(entry: MonthEntry) -> dict[str, int]:
    """Inverse of the day mapping: group id -> day of month."""

    lookup: dict[str, int] = {}
    for day, group_id in entry.days.items():
        if day.isdigit():
            lookup[group_id] = int(day)
    return lookup
