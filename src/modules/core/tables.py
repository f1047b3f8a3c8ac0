"""Generic column filter + sort for list views.

Every list endpoint declares a ``Table``: an explicit mapping of column key
to accessor and column kind.  The table applies

- per-column free-text filters (logical AND, case-insensitive containment,
  with calendar-date matching for timestamp columns), and
- a single sort (ascending / descending) whose comparison depends on the
  value types found in the column.

Rows can be any object; accessors decide how a column value is read.  Keys
that are not declared fall back to plain attribute access.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Mapping, TypeVar

from django.utils import timezone

from modules.core.formatting import format_number

R = TypeVar("R")

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ColumnKind(StrEnum):
    TEXT = "text"
    NUMBER = "number"
    TIMESTAMP = "timestamp"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Column:
    """A filterable, sortable column of a table."""

    key: str
    accessor: Callable[[Any], Any]
    kind: ColumnKind = ColumnKind.TEXT


@dataclass(frozen=True)
class SortSpec:
    """The active sort of a table: one key and a direction."""

    key: str
    direction: SortDirection = SortDirection.ASC

    @property
    def modifier(self) -> int:
        return 1 if self.direction == SortDirection.ASC else -1

    def toggled(self, key: str) -> SortSpec:
        """Sort spec after a click on *key*.

        The same key flips ascending to descending; anything else
        (a new key, or a second click on a descending key) sorts ascending.
        """
        if key == self.key and self.direction == SortDirection.ASC:
            return SortSpec(key, SortDirection.DESC)
        return SortSpec(key, SortDirection.ASC)

    @classmethod
    def parse(cls, value: str) -> SortSpec:
        """Parse an ``ordering`` parameter: ``key`` or ``-key``."""
        value = value.strip()
        if value.startswith("-"):
            return cls(value[1:], SortDirection.DESC)
        return cls(value, SortDirection.ASC)

    def as_param(self) -> str:
        prefix = "-" if self.direction == SortDirection.DESC else ""
        return f"{prefix}{self.key}"


class Table:
    """Column table that filters and sorts rows in memory."""

    def __init__(self, columns: Iterable[Column]) -> None:
        self._columns: Dict[str, Column] = {column.key: column for column in columns}

    @property
    def keys(self) -> List[str]:
        return list(self._columns)

    def has_column(self, key: str) -> bool:
        return key in self._columns

    def column(self, key: str) -> Column:
        column = self._columns.get(key)
        if column is None:
            return Column(key, lambda row: getattr(row, key, None))
        return column

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter(self, rows: Iterable[R], filters: Mapping[str, str]) -> List[R]:
        """Keep rows matching every non-empty filter."""
        active = [
            (self.column(key), text.lower())
            for key, text in filters.items()
            if text
        ]
        if not active:
            return list(rows)
        return [
            row
            for row in rows
            if all(_matches(column, column.accessor(row), text) for column, text in active)
        ]

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort(self, rows: Iterable[R], spec: SortSpec) -> List[R]:
        """Return rows ordered by ``spec``; equal values keep their order."""
        accessor = self.column(spec.key).accessor
        decorated = [(accessor(row), row) for row in rows]
        if len(decorated) <= 1:
            return [row for _, row in decorated]
        modifier = spec.modifier

        def _cmp(left: tuple, right: tuple) -> int:
            return compare_values(left[0], right[0]) * modifier

        decorated.sort(key=cmp_to_key(_cmp))
        return [row for _, row in decorated]

    def apply(
        self, rows: Iterable[R], filters: Mapping[str, str], spec: SortSpec
    ) -> List[R]:
        return self.sort(self.filter(rows, filters), spec)


# ----------------------------------------------------------------------
# Value helpers
# ----------------------------------------------------------------------


def stringify(value: Any) -> str:
    """Render a cell value as the text a filter is matched against.

    Missing and falsy values render as an empty string.
    """
    if value is None or value == "" or value is False:
        return ""
    if isinstance(value, bool):
        return "true"
    if isinstance(value, (int, float, Decimal)):
        if not value:
            return ""
        return format_number(value)
    return str(value)


def _matches(column: Column, value: Any, text: str) -> bool:
    if column.kind == ColumnKind.TIMESTAMP and isinstance(value, datetime):
        local = timezone.localtime(value) if timezone.is_aware(value) else value
        if ISO_DATE_PATTERN.match(text):
            return local.date().isoformat() == text
        return text in f"{local:%d.%m.%Y}"
    return text in stringify(value).lower()


def _collation_key(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def _is_ordinal(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal, datetime)) and not isinstance(
        value, bool
    )


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison used by ``Table.sort``.

    - equal values compare equal;
    - two strings compare by accent- and case-insensitive collation, the
      raw strings breaking ties;
    - two numbers (or two timestamps) compare numerically;
    - anything else treats a missing value as ``0``; the left value sorts
      after the right one only when it is strictly greater.
    """
    if left == right:
        return 0
    if isinstance(left, str) and isinstance(right, str):
        return _sign(_collation_key(left), _collation_key(right)) or _sign(left, right)
    if _is_ordinal(left) and _is_ordinal(right):
        try:
            return _sign(left, right)
        except TypeError:
            pass
    left = left or 0
    right = right or 0
    try:
        return 1 if left > right else -1
    except TypeError:
        return 1 if str(left) > str(right) else -1


def sort_spec_from_params(
    params: Mapping[str, str], table: Table, default: SortSpec, param: str = "ordering"
) -> SortSpec:
    """Read the sort spec from query params, falling back to ``default``."""
    raw = params.get(param)
    if not raw:
        return default
    spec = SortSpec.parse(raw)
    if not table.has_column(spec.key):
        return default
    return spec


def filters_from_params(params: Mapping[str, str], table: Table) -> Dict[str, str]:
    """Pick the column filters out of query params."""
    return {key: params[key] for key in table.keys if params.get(key)}
