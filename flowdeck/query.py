"""OData query construction for the workflows endpoint."""

from __future__ import annotations

from typing import Dict, List

import httpx

from .constants import DEFAULT_ORDERBY, DEFAULT_PAGE_SIZE
from .contracts import FilterSet, SortSpec


def escape_literal(text: str) -> str:
    """Escape ``text`` for use inside a single-quoted OData string literal."""
    return text.replace("'", "''")


def build_filter_clauses(filters: FilterSet) -> List[str]:
    """Return one clause per populated filter field.

    Empty search text, ``None`` and negative categories are left out rather
    than sent as wildcards.
    """
    clauses: List[str] = []
    if filters.status is not None:
        clauses.append(f"statecode eq {int(filters.status)}")
    if filters.search_text:
        term = escape_literal(filters.search_text)
        clauses.append(
            f"(contains(name, '{term}') or contains(uniquename, '{term}'))"
        )
    if filters.category is not None and filters.category >= 0:
        clauses.append(f"category eq {int(filters.category)}")
    return clauses


def build_orderby(sort: SortSpec) -> str:
    if not sort.field:
        return DEFAULT_ORDERBY
    direction = "asc" if sort.direction == "ascending" else "desc"
    return f"{sort.field} {direction}"


def build_query_params(
    sort: SortSpec, filters: FilterSet, page_size: int = DEFAULT_PAGE_SIZE
) -> Dict[str, str]:
    """Query parameters for the first page of a new query."""
    params = {"$top": str(page_size), "$count": "true"}
    clauses = build_filter_clauses(filters)
    if clauses:
        params["$filter"] = " and ".join(clauses)
    params["$orderby"] = build_orderby(sort)
    return params


def build_request_url(
    base_url: str,
    sort: SortSpec,
    filters: FilterSet,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> str:
    """Full request URL for the first page of a new query."""
    params = build_query_params(sort, filters, page_size)
    return str(httpx.URL(base_url, params=params))
