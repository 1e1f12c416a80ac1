"""Contrato del cliente del servicio de boards.

Por qué Protocol:
- Los servicios del Core dependen de esta forma, no del cliente HTTP concreto.
- Los tests pueden sustituirlo por un doble en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Board, BoardItem


@runtime_checkable
class BoardAPI(Protocol):
    """Operations the commands need from the remote board service."""

    def fetch_board(self, board_id: str) -> Board:
        ...

    def fetch_board_items(self, board_id: str) -> list[BoardItem]:
        """Return the logging user's items (first page only)."""

        ...

    def create_log_item(self, board_id: int, group_id: str, item_name: str, hours: str) -> str:
        """Create a pulse and return its relative link."""

        ...

    def fetch_pulse_relative_link(self, pulse_id: str) -> str:
        ...
