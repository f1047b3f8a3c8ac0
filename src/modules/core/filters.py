"""DRF filter backend driving the in-memory ``Table`` engine."""

from __future__ import annotations

from typing import Any, List

from rest_framework.filters import BaseFilterBackend

from modules.core.tables import filters_from_params, sort_spec_from_params


class ColumnTableFilterBackend(BaseFilterBackend):
    """Apply column filters and the ``ordering`` sort declared by a view.

    The view provides:

    - ``table``: the ``Table`` describing its columns;
    - ``default_sort``: the ``SortSpec`` used when no valid ``ordering``
      parameter is given;
    - optionally ``build_rows(queryset)``: turns model instances into the
      rows the table reads (defaults to the instances themselves).

    Must be the last backend in ``filter_backends``: it returns a list.
    """

    ordering_param = "ordering"

    def filter_queryset(self, request, queryset, view) -> List[Any]:
        table = view.table
        build_rows = getattr(view, "build_rows", None)
        rows = build_rows(queryset) if build_rows else list(queryset)
        filters = filters_from_params(request.query_params, table)
        spec = sort_spec_from_params(
            request.query_params, table, view.default_sort, self.ordering_param
        )
        return table.apply(rows, filters, spec)
