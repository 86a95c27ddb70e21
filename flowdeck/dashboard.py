"""Filter, sort and pagination state for the workflow dashboard."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from . import pagination
from .clients import BaseWorkflowClient
from .contracts import FilterSet, PageState, SortSpec, Workflow, WorkflowPage, describe
from .errors import FlowdeckError
from .view import summarize

logger = logging.getLogger(__name__)


class WorkflowDashboard:
    """Owns the state the dashboard displays and the triggers that change it.

    At most one fetch is outstanding at a time. Triggers that arrive while a
    fetch is in flight are dropped. State is only committed after a fetch
    succeeds, so a failed trigger leaves filters, sort and pagination as they
    were.
    """

    def __init__(
        self,
        client: BaseWorkflowClient,
        sort: Optional[SortSpec] = None,
        filters: Optional[FilterSet] = None,
        page_size: Optional[int] = None,
    ) -> None:
        self._client = client
        self.sort = sort or SortSpec()
        self.draft_filters = filters or FilterSet()
        self.applied_filters = self.draft_filters
        self.page = PageState()
        self.records: List[Workflow] = []
        self.error: Optional[str] = None
        self.page_size = page_size or getattr(client, "page_size", None)
        self._in_flight = False

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    @property
    def visible_records(self) -> List[Workflow]:
        """Records to render; empty while an error is displayed."""
        return [] if self.error else self.records

    def edit_filters(self, **changes: Any) -> FilterSet:
        """Update the draft filters without fetching."""
        self.draft_filters = FilterSet(
            **{**self.draft_filters.model_dump(), **changes}
        )
        return self.draft_filters

    async def load(self) -> bool:
        """Re-run the applied query from its first page."""
        return await self._new_query(self.sort, self.applied_filters)

    async def apply_filters(self) -> bool:
        """Submit the draft filters as a new query."""
        return await self._new_query(self.sort, self.draft_filters)

    async def set_sort(self, sort: SortSpec) -> bool:
        return await self._new_query(sort, self.applied_filters)

    async def sort_by(self, field: str) -> bool:
        """Column-header sort: toggle direction when ``field`` is already active."""
        return await self.set_sort(self.sort.toggled(field))

    async def next_page(self) -> bool:
        if self.page.next_cursor is None or self._in_flight:
            logger.debug("Ignoring next page request")
            return False
        result = await self._fetch(self.sort, self.applied_filters, self.page.next_cursor)
        if result is None:
            return False
        self._commit(result, pagination.advance(self.page, result))
        return True

    async def previous_page(self) -> bool:
        if self.page.current_page <= 1 or self._in_flight:
            logger.debug("Ignoring previous page request")
            return False
        locator = pagination.previous_locator(self.page)
        if locator is None:
            return False
        result = await self._fetch(self.sort, self.applied_filters, locator)
        if result is None:
            return False
        self._commit(result, pagination.retreat(self.page, result))
        return True

    def summary(self) -> str:
        return summarize(self.page, self.page_size or len(self.records) or 1)

    async def _new_query(self, sort: SortSpec, filters: FilterSet) -> bool:
        if self._in_flight:
            logger.debug("Ignoring query change while a fetch is in flight")
            return False
        logger.info(f"New query: {describe(filters)}; sort {describe(sort)}")
        result = await self._fetch(sort, filters, None)
        if result is None:
            return False
        state = pagination.start_query(result)
        self.sort = sort
        self.applied_filters = filters
        self._commit(result, state)
        return True

    async def _fetch(
        self, sort: SortSpec, filters: FilterSet, request_url: Optional[str]
    ) -> Optional[WorkflowPage]:
        self._in_flight = True
        try:
            return await self._client.fetch_page(sort, filters, request_url)
        except FlowdeckError as e:
            logger.warning(f"Workflow fetch failed: {e}")
            self.error = f"Failed to fetch data: {e}"
            return None
        finally:
            self._in_flight = False

    def _commit(self, result: WorkflowPage, page: PageState) -> None:
        self.records = list(result.records)
        self.page = page
        self.error = None
