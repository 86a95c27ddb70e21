"""Plain-text rendering of workflow pages."""

from __future__ import annotations

import math
from datetime import datetime
from typing import List, Optional, Sequence

from .constants import CATEGORIES, STATUSES
from .contracts import PageState, SortSpec, Workflow

COLUMNS = [
    ("name", "Name", 40),
    ("uniquename", "Unique Name", 30),
    ("category", "Category", 22),
    ("statecode", "Status", 10),
    ("modifiedon", "Modified On", 17),
]

EMPTY_MESSAGE = (
    "No Workflows Found. Try adjusting your search or filter criteria."
)


def category_label(code: Optional[int]) -> str:
    if code is None:
        return ""
    return CATEGORIES.get(code, str(code))


def status_label(code: Optional[int]) -> str:
    if code is None:
        return ""
    return STATUSES.get(code, str(code))


def summarize(page: PageState, page_size: int) -> str:
    """Describe the visible slice, e.g. ``Showing 51 to 100 of 120 results``."""
    if page.total_count == 0:
        return EMPTY_MESSAGE
    total_pages = math.ceil(page.total_count / page_size)
    start = (page.current_page - 1) * page_size + 1
    end = min(page.current_page * page_size, page.total_count)
    return (
        f"Showing {start} to {end} of {page.total_count} results"
        f" | Page {page.current_page} of {total_pages}"
    )


def _cell(record: Workflow, field: str) -> str:
    formatted = record.formatted(field)
    if formatted:
        return formatted
    value = getattr(record, field, None)
    if field == "category":
        return category_label(value)
    if field == "statecode":
        return status_label(value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return "" if value is None else str(value)


def _fit(text: str, width: int) -> str:
    if len(text) > width:
        return text[: width - 1] + "…"
    return text.ljust(width)


def render_table(records: Sequence[Workflow], sort: Optional[SortSpec] = None) -> str:
    """Render ``records`` as a fixed-width table with a sort marker."""
    header: List[str] = []
    for field, title, width in COLUMNS:
        if sort is not None and sort.field == field:
            title = f"{title} {'^' if sort.direction == 'ascending' else 'v'}"
        header.append(_fit(title, width))
    lines = ["  ".join(header).rstrip()]
    lines.append("  ".join("-" * width for _, _, width in COLUMNS))
    for record in records:
        lines.append(
            "  ".join(_fit(_cell(record, f), w) for f, _, w in COLUMNS).rstrip()
        )
    return "\n".join(lines)
