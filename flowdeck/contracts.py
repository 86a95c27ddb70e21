"""Data contracts shared by the fetch clients and the dashboard."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_SORT_FIELD, FORMATTED_VALUE_SUFFIX, SORTABLE_FIELDS

SortDirection = Literal["ascending", "descending"]


class Workflow(BaseModel):
    """One workflow row as returned by the data API.

    Extra columns and OData annotations are kept so callers can read
    formatted values without a second request.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    workflowid: str
    name: str = ""
    uniquename: Optional[str] = None
    category: Optional[int] = None
    statecode: Optional[int] = None
    statuscode: Optional[int] = None
    createdon: Optional[datetime] = None
    modifiedon: Optional[datetime] = None
    description: Optional[str] = None

    def formatted(self, field: str) -> Optional[str]:
        """Return the server-formatted display value for ``field`` if present."""
        extra = self.model_extra or {}
        return extra.get(f"{field}{FORMATTED_VALUE_SUFFIX}")


class SortSpec(BaseModel):
    """Requested ordering of the result set."""

    model_config = ConfigDict(frozen=True)

    field: Optional[str] = DEFAULT_SORT_FIELD
    direction: SortDirection = "descending"

    @field_validator("field")
    @classmethod
    def _check_sortable(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by unknown column: {value}")
        return value

    def toggled(self, field: str) -> "SortSpec":
        """Sort spec produced by clicking the ``field`` column header."""
        if self.field == field and self.direction == "ascending":
            return SortSpec(field=field, direction="descending")
        return SortSpec(field=field, direction="ascending")


class FilterSet(BaseModel):
    """Search and filter constraints for a query."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    search_text: str = ""
    category: Optional[int] = None
    status: Optional[int] = None


class WorkflowPage(BaseModel):
    """Normalized response for one page of workflows."""

    records: List[Workflow] = Field(default_factory=list)
    next_cursor: Optional[str] = None
    total_count: int = Field(default=0, ge=0)
    request_url: str


class PageState(BaseModel):
    """Cursor bookkeeping for the currently displayed page.

    ``cursor_stack`` holds the request URL that produced each visited page,
    so its length equals ``current_page`` after every successful fetch.
    """

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(default=1, ge=1)
    cursor_stack: Tuple[str, ...] = ()
    next_cursor: Optional[str] = None
    total_count: int = Field(default=0, ge=0)

    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def is_consistent(self) -> bool:
        return len(self.cursor_stack) == self.current_page


def describe(obj: Any) -> str:
    """Short log-friendly representation of a filter or sort model."""
    return ", ".join(f"{k}={v!r}" for k, v in obj.model_dump().items())
