"""Tests for core/domain/ordering.py."""

from __future__ import annotations

from functools import cmp_to_key

from core.domain.models import GroupSummary
from core.domain.ordering import compare_group_titles, sort_items, sort_summaries
from tests.conftest import make_item


def test_titles_sort_by_day_suffix() -> None:
    titles = ["Fri Apr 10", "Mon Apr 01", "Tue Apr 02"]
    ordered = sorted(titles, key=cmp_to_key(compare_group_titles))
    assert [t[-2:] for t in ordered] == ["01", "02", "10"]


def test_day_suffix_wins_over_weekday_name() -> None:
    # Whole-string order would put "Fri" before "Mon".
    assert compare_group_titles("Mon Apr 01", "Fri Apr 10") < 0


def test_non_ten_char_title_falls_back_to_whole_string() -> None:
    assert compare_group_titles("Backlog", "Mon Apr 01") < 0
    assert compare_group_titles("Mon Apr 01", "Backlog") > 0
    assert compare_group_titles("Backlog", "Backlog") == 0


def test_items_use_explicit_day_before_title() -> None:
    a = make_item("2", "Fri Apr 10", "1").model_copy(update={"day": 10})
    b = make_item("1", "Mon Apr 01", "1").model_copy(update={"day": 1})
    c = make_item("3", "Custom group name", "1").model_copy(update={"day": 2})
    assert [item.id for item in sort_items([a, b, c])] == ["1", "3", "2"]


def test_items_without_day_use_title_then_id() -> None:
    items = [
        make_item("20", "Tue Apr 02", "1"),
        make_item("10", "Tue Apr 02", "1"),
        make_item("30", "Mon Apr 01", "1"),
    ]
    assert [item.id for item in sort_items(items)] == ["30", "10", "20"]


def test_summaries_fall_back_to_group_title() -> None:
    groups = [
        GroupSummary(group="Zeta"),
        GroupSummary(group="Fri Apr 10"),
        GroupSummary(group="Mon Apr 01"),
        GroupSummary(group="Alpha"),
    ]
    ordered = [g.group for g in sort_summaries(groups)]
    assert ordered.index("Mon Apr 01") < ordered.index("Fri Apr 10")
    assert ordered.index("Alpha") < ordered.index("Zeta")


def test_mixed_known_and_unknown_days_sort_consistently() -> None:
    items = [
        make_item("4", "Standup notes", "1"),
        make_item("3", "Fri Apr 10", "1").model_copy(update={"day": 10}),
        make_item("2", "Tue Apr 02", "1"),
        make_item("1", "Retro", "1"),
        make_item("5", "Renamed first day", "1").model_copy(update={"day": 1}),
    ]
    expected = ["5", "2", "3", "1", "4"]
    assert [item.id for item in sort_items(items)] == expected
    assert [item.id for item in sort_items(list(reversed(items)))] == expected
