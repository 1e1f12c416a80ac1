"""Operaciones de los comandos sobre el board.

Por qué un servicio:
- La capa CLI solo carga configuración, arma el cliente e imprime.
- Todo recibe su configuración explícitamente: aquí no se leen archivos ni
  variables de entorno.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.domain.models import Board, BoardItem, BoardsConf, GroupSummary
from core.domain.ordering import sort_items, sort_summaries
from core.errors import validation_error
from core.interfaces.board_api import BoardAPI
from core.resolver import day_lookup, parse_board_id, resolve_group_id, resolve_month, split_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedPulse:
    """Result of `create_one`."""

    board_id: int
    group_id: str
    relative_link: str


def pulse_url(board_host: str, relative_link: str) -> str:
    return f"https://{board_host}{relative_link}"


def create_one(api: BoardAPI, boards_conf: BoardsConf, date: str, item_name: str, hours: str) -> CreatedPulse:
    """Create one log entry for `date` (`yyyy-mm-dd`)."""

    month, day = split_date(date)
    entry = resolve_month(boards_conf, month)
    board_id = parse_board_id(entry.board_id, month)
    group_id = resolve_group_id(boards_conf, month, day)
    logger.debug("create_one day=%s boardID=%s groupID=%s", date, board_id, group_id)

    link = api.create_log_item(board_id, group_id, item_name, hours)
    return CreatedPulse(board_id=board_id, group_id=group_id, relative_link=link)


def get_board_items(api: BoardAPI, boards_conf: BoardsConf, month: str) -> list[BoardItem]:
    """Fetch the logging user's items for `month` (`yyyy-mm`), sorted by day."""

    entry = resolve_month(boards_conf, month)
    days = day_lookup(entry)
    items = [
        item.model_copy(update={"day": days.get(item.group.id)})
        for item in api.fetch_board_items(entry.board_id)
    ]
    return sort_items(items)


def summarize_items(items: list[BoardItem]) -> list[GroupSummary]:
    """Total hours and pulse count per group."""

    groups: dict[str, GroupSummary] = {}
    for item in items:
        try:
            hours = float(item.hours_text)
        except ValueError as exc:
            raise validation_error(
                f"hours = {item.hours_text} (pulse_id = {item.id}): not a number. Exiting.", exc
            ) from exc
        summary = groups.get(item.group.title)
        if summary is None:
            summary = GroupSummary(group=item.group.title, day=item.day)
            groups[item.group.title] = summary
        summary.total_hours += hours
        summary.pulse_count += 1
    return sort_summaries(list(groups.values()))


def get_board_item_summary(api: BoardAPI, boards_conf: BoardsConf, month: str) -> list[GroupSummary]:
    return summarize_items(get_board_items(api, boards_conf, month))


def get_pulse_link(api: BoardAPI, board_host: str, pulse_id: str) -> str:
    return pulse_url(board_host, api.fetch_pulse_relative_link(pulse_id))


def board_month_stub(board: Board, month: str = "yyyy-mm") -> dict[str, Any]:
    """Boards-document fragment for `board`, ready to paste under `months`.

    Produces TOML like::

        [months.yyyy-mm]
        board_id = "1234567890"
        name = "September 2023"

        [months.yyyy-mm.days]
        "Fri Sep 01" = "fri_sep_01"
    """

    groups = {group.title: group.id for group in board.groups}
    return {
        "months": {
            month: {
                "board_id": board.id,
                "name": board.name,
                "days": groups,
            },
        },
    }
