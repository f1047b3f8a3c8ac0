"""Unit tests for the generic column table (filter + sort)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from operator import attrgetter
from typing import Any, Optional
from zoneinfo import ZoneInfo

import pytest

from modules.core.formatting import format_number
from modules.core.tables import (
    Column,
    ColumnKind,
    SortDirection,
    SortSpec,
    Table,
    compare_values,
    filters_from_params,
    sort_spec_from_params,
    stringify,
)

pytestmark = pytest.mark.unit

WARSAW = ZoneInfo("Europe/Warsaw")


@dataclass
class Row:
    id: str
    name: str
    cost: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    extra: Any = None


TABLE = Table(
    [
        Column("id", attrgetter("id")),
        Column("name", attrgetter("name")),
        Column("cost", attrgetter("cost"), ColumnKind.NUMBER),
        Column("created_at", attrgetter("created_at"), ColumnKind.TIMESTAMP),
    ]
)


@pytest.fixture()
def rows():
    return [
        Row("0001", "Żaneta Nowak", Decimal("300"), datetime(2026, 10, 1, 9, 0, tzinfo=WARSAW)),
        Row("0002", "adam Kowalski", Decimal("120.50"), datetime(2026, 10, 2, 23, 30, tzinfo=WARSAW)),
        Row("0003", "Zenon Mazur", None, datetime(2026, 9, 15, 12, 0, tzinfo=WARSAW)),
        Row("0004", "Bud-Max Sp. z o.o.", Decimal("120.50"), datetime(2026, 10, 2, 8, 0, tzinfo=WARSAW)),
    ]


# ===========================================================================
# Filtering
# ===========================================================================


class TestFilter:
    def test_no_filters_keeps_everything(self, rows):
        assert TABLE.filter(rows, {}) == rows

    def test_empty_filter_text_is_ignored(self, rows):
        assert TABLE.filter(rows, {"name": ""}) == rows

    def test_containment_is_case_insensitive(self, rows):
        result = TABLE.filter(rows, {"name": "KOWAL"})
        assert [row.id for row in result] == ["0002"]

    def test_filters_are_combined_with_and(self, rows):
        result = TABLE.filter(rows, {"name": "a", "cost": "120"})
        assert [row.id for row in result] == ["0002", "0004"]
        result = TABLE.filter(rows, {"name": "bud", "cost": "300"})
        assert result == []

    def test_numbers_match_on_their_plain_rendering(self, rows):
        result = TABLE.filter(rows, {"cost": "120.5"})
        assert [row.id for row in result] == ["0002", "0004"]

    def test_missing_value_never_matches_text(self, rows):
        result = TABLE.filter(rows, {"cost": "0"})
        assert "0003" not in [row.id for row in result]

    def test_iso_date_matches_local_calendar_day(self, rows):
        result = TABLE.filter(rows, {"created_at": "2026-10-02"})
        assert [row.id for row in result] == ["0002", "0004"]

    def test_iso_date_requires_exact_day(self, rows):
        assert TABLE.filter(rows, {"created_at": "2026-10-03"}) == []

    def test_other_date_text_matches_formatted_date(self, rows):
        result = TABLE.filter(rows, {"created_at": "09.2026"})
        assert [row.id for row in result] == ["0003"]

    def test_unknown_key_uses_attribute_containment(self, rows):
        rows[0].extra = "pilne"
        result = TABLE.filter(rows, {"extra": "PIL"})
        assert [row.id for row in result] == ["0001"]

    @pytest.mark.parametrize(
        "column, text", [("name", "nowak"), ("id", "0001"), ("name", "sp. z o.o.")]
    )
    def test_longer_text_never_finds_more(self, rows, column, text):
        previous = rows
        for end in range(1, len(text) + 1):
            current = TABLE.filter(rows, {column: text[:end]})
            assert all(row in previous for row in current)
            previous = current


# ===========================================================================
# Sorting
# ===========================================================================


class TestSort:
    def test_strings_sort_ignoring_case_and_accents(self, rows):
        result = TABLE.sort(rows, SortSpec("name"))
        assert [row.name for row in result] == [
            "adam Kowalski",
            "Bud-Max Sp. z o.o.",
            "Żaneta Nowak",
            "Zenon Mazur",
        ]

    def test_descending_reverses_order(self, rows):
        result = TABLE.sort(rows, SortSpec("id", SortDirection.DESC))
        assert [row.id for row in result] == ["0004", "0003", "0002", "0001"]

    def test_numbers_sort_numerically_with_missing_as_zero(self, rows):
        result = TABLE.sort(rows, SortSpec("cost"))
        assert [row.id for row in result] == ["0003", "0002", "0004", "0001"]

    def test_equal_values_keep_their_order(self, rows):
        result = TABLE.sort(rows, SortSpec("cost", SortDirection.DESC))
        assert [row.id for row in result] == ["0001", "0002", "0004", "0003"]

    def test_timestamps_sort_chronologically(self, rows):
        result = TABLE.sort(rows, SortSpec("created_at"))
        assert [row.id for row in result] == ["0003", "0001", "0004", "0002"]

    def test_apply_filters_then_sorts(self, rows):
        result = TABLE.apply(rows, {"cost": "120"}, SortSpec("id", SortDirection.DESC))
        assert [row.id for row in result] == ["0004", "0002"]

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_empty_and_single_row_lists_are_unchanged(self, rows, direction):
        assert TABLE.sort([], SortSpec("name", direction)) == []
        assert TABLE.sort(rows[:1], SortSpec("name", direction)) == rows[:1]


class TestCompareValues:
    def test_equal(self):
        assert compare_values("a", "a") == 0
        assert compare_values(Decimal("1.0"), 1) == 0

    def test_numbers(self):
        assert compare_values(1, 2) == -1
        assert compare_values(Decimal("2.5"), 1) == 1

    def test_missing_against_number_counts_as_zero(self):
        assert compare_values(None, 5) == -1
        assert compare_values(5, None) == 1

    def test_tie_after_coercion_goes_to_greater_branch(self):
        assert compare_values(None, "") == -1
        assert compare_values("", None) == -1

    def test_mixed_types_do_not_raise(self):
        assert compare_values("abc", 5) in (-1, 1)


# ===========================================================================
# Sort spec
# ===========================================================================


class TestSortSpec:
    def test_same_key_toggles_to_descending(self):
        spec = SortSpec("name").toggled("name")
        assert spec == SortSpec("name", SortDirection.DESC)

    def test_second_toggle_goes_back_to_ascending(self):
        spec = SortSpec("name", SortDirection.DESC).toggled("name")
        assert spec == SortSpec("name", SortDirection.ASC)

    def test_new_key_sorts_ascending(self):
        spec = SortSpec("name", SortDirection.DESC).toggled("id")
        assert spec == SortSpec("id", SortDirection.ASC)

    def test_parse_and_render(self):
        assert SortSpec.parse("-created_at") == SortSpec("created_at", SortDirection.DESC)
        assert SortSpec.parse("name").as_param() == "name"
        assert SortSpec("id", SortDirection.DESC).as_param() == "-id"


class TestParams:
    def test_unknown_ordering_falls_back_to_default(self):
        default = SortSpec("id", SortDirection.DESC)
        assert sort_spec_from_params({"ordering": "-nope"}, TABLE, default) == default

    def test_missing_ordering_falls_back_to_default(self):
        default = SortSpec("id", SortDirection.DESC)
        assert sort_spec_from_params({}, TABLE, default) == default

    def test_valid_ordering_is_used(self):
        default = SortSpec("id")
        spec = sort_spec_from_params({"ordering": "-name"}, TABLE, default)
        assert spec == SortSpec("name", SortDirection.DESC)

    def test_only_declared_columns_become_filters(self):
        params = {"name": "jan", "page": "2", "cost": "", "ordering": "id"}
        assert filters_from_params(params, TABLE) == {"name": "jan"}


class TestFormatting:
    def test_integral_numbers_drop_decimals(self):
        assert format_number(Decimal("250.00")) == "250"

    def test_fractions_keep_significant_digits(self):
        assert format_number(Decimal("250.50")) == "250.5"

    def test_stringify_missing_values(self):
        assert stringify(None) == ""
        assert stringify("") == ""
        assert stringify(0) == ""
