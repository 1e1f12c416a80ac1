"""Tests for core/resolver.py -- date to board/group resolution."""

from __future__ import annotations

import pytest

from core.domain.models import BoardsConf, MonthEntry
from core.errors import CLIError, ErrorKind
from core.resolver import day_lookup, parse_board_id, resolve_board_id, resolve_group_id, split_date


class TestSplitDate:
    def test_well_formed(self) -> None:
        assert split_date("2024-04-10") == ("2024-04", "10")

    @pytest.mark.parametrize("date", ["2024-4-10", "2024-04-1", "2024-04-100", "", "20240410"])
    def test_wrong_length_is_rejected(self, date: str) -> None:
        with pytest.raises(CLIError) as excinfo:
            split_date(date)
        assert excinfo.value.kind is ErrorKind.VALIDATION
        assert "yyyy-mm-dd" in excinfo.value.message

    def test_ten_chars_but_not_a_date(self) -> None:
        with pytest.raises(CLIError):
            split_date("2024/04/10")


class TestResolve:
    def test_board_id(self, boards_conf: BoardsConf) -> None:
        # Integer board ids in the document are kept as strings.
        assert resolve_board_id(boards_conf, "2024-04") == "5064273451"

    def test_group_id(self, boards_conf: BoardsConf) -> None:
        assert resolve_group_id(boards_conf, "2024-04", "02") == "tue_apr_02"

    def test_unmapped_month_names_month(self, boards_conf: BoardsConf) -> None:
        with pytest.raises(CLIError) as excinfo:
            resolve_board_id(boards_conf, "2023-01")
        assert '"months.2023-01.board_id": not found' in excinfo.value.message

    def test_unmapped_day_names_month_and_day(self, boards_conf: BoardsConf) -> None:
        with pytest.raises(CLIError) as excinfo:
            resolve_group_id(boards_conf, "2024-04", "15")
        assert '"months.2024-04.days.15": not found' in excinfo.value.message

    def test_empty_months_mapping(self) -> None:
        conf = BoardsConf(person_column_id="p", hours_column_id="h")
        with pytest.raises(CLIError):
            resolve_group_id(conf, "2024-04", "01")

    def test_month_without_board_id(self) -> None:
        conf = BoardsConf(months={"2024-04": MonthEntry(days={"01": "g"})})
        with pytest.raises(CLIError):
            resolve_board_id(conf, "2024-04")


def test_parse_board_id_rejects_non_numeric() -> None:
    assert parse_board_id("123", "2024-04") == 123
    with pytest.raises(CLIError) as excinfo:
        parse_board_id("abc", "2024-04")
    assert "not a number" in excinfo.value.message


def test_day_lookup_inverts_mapping() -> None:
    entry = MonthEntry(board_id="1", days={"01": "g1", "10": "g10", "Fri Sep 01": "ignored"})
    assert day_lookup(entry) == {"g1": 1, "g10": 10}
