"""Shared fixtures: configuration documents in a temp dir and an in-memory board API."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import ConfPaths
from core.domain.models import Board, BoardItem, BoardsConf

USER_TOML = """\
api_access_token = "tok-123"
logging_user_id = "42"
"""

BOARDS_TOML = """\
description = "Boards for April"
person_column_id = "person"
hours_column_id = "numbers"

[months.2024-04]
board_id = "5064273451"

[months.2024-04.days]
"01" = "mon_apr_01"
"02" = "tue_apr_02"
"10" = "wed_apr_10"
"""


@pytest.fixture
def conf_paths(tmp_path: Path) -> ConfPaths:
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()
    return ConfPaths(user_conf=config_dir / "config.toml", boards_conf=data_dir / "boards.toml")


@pytest.fixture
def written_conf(conf_paths: ConfPaths) -> ConfPaths:
    conf_paths.user_conf.write_text(USER_TOML, encoding="utf-8")
    conf_paths.boards_conf.write_text(BOARDS_TOML, encoding="utf-8")
    return conf_paths


@pytest.fixture
def mlog_env(monkeypatch: pytest.MonkeyPatch, written_conf: ConfPaths) -> ConfPaths:
    """Point AppSettings at the temp documents."""

    monkeypatch.setenv("MLOG_CONFIG_DIR", str(written_conf.user_conf.parent))
    monkeypatch.setenv("MLOG_DATA_DIR", str(written_conf.boards_conf.parent))
    return written_conf


@pytest.fixture
def boards_conf() -> BoardsConf:
    return BoardsConf.model_validate(
        {
            "person_column_id": "person",
            "hours_column_id": "numbers",
            "months": {
                "2024-04": {
                    "board_id": 5064273451,
                    "days": {"01": "mon_apr_01", "02": "tue_apr_02", "10": "wed_apr_10"},
                },
                "2024-05": {"board_id": "not-a-number", "days": {"01": "wed_may_01"}},
            },
        }
    )


def make_item(item_id: str, title: str, hours: str, group_id: str = "", name: str = "work") -> BoardItem:
    return BoardItem.model_validate(
        {
            "id": item_id,
            "name": name,
            "group": {"id": group_id, "title": title},
            "column_values": [{"text": hours}],
        }
    )


class FakeBoardAPI:
    """In-memory stand-in for the monday.com client."""

    def __init__(self, items: list[BoardItem] | None = None, board: Board | None = None) -> None:
        self.items = items or []
        self.board = board
        self.created: list[tuple[int, str, str, str]] = []
        self.requested_boards: list[str] = []

    def fetch_board(self, board_id: str) -> Board:
        assert self.board is not None
        return self.board

    def fetch_board_items(self, board_id: str) -> list[BoardItem]:
        self.requested_boards.append(board_id)
        return list(self.items)

    def create_log_item(self, board_id: int, group_id: str, item_name: str, hours: str) -> str:
        self.created.append((board_id, group_id, item_name, hours))
        return f"/boards/{board_id}/pulses/999"

    def fetch_pulse_relative_link(self, pulse_id: str) -> str:
        return f"/boards/1/pulses/{pulse_id}"


@pytest.fixture
def fake_api() -> FakeBoardAPI:
    return FakeBoardAPI()
