"""Columns of the customer list."""

from __future__ import annotations

from operator import attrgetter

from modules.core.tables import Column, ColumnKind, SortDirection, SortSpec, Table

CUSTOMER_TABLE = Table(
    [
        Column("id", attrgetter("id")),
        Column("name", attrgetter("name")),
        Column("phone", attrgetter("phone")),
        Column("email", attrgetter("email")),
        Column("type", attrgetter("type")),
        Column("tax_id", attrgetter("tax_id")),
        Column("created_at", attrgetter("created_at"), ColumnKind.TIMESTAMP),
    ]
)

DEFAULT_CUSTOMER_SORT = SortSpec("id", SortDirection.DESC)
