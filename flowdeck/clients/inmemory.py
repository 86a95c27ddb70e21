"""In-memory fetch client for testing."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Any, Deque, Iterable, List, Mapping, Optional, Union

import httpx

from ..constants import DEFAULT_PAGE_SIZE
from ..contracts import FilterSet, SortSpec, Workflow, WorkflowPage
from ..query import build_request_url
from .base import BaseWorkflowClient

SKIP_PARAM = "$skiptoken"


class InMemoryWorkflowClient(BaseWorkflowClient):
    """Serve a fixed list of workflows in pages.

    Records come back in the order given. Sort and filters only shape the
    request URL; they are not evaluated locally. Every call is recorded in
    ``calls`` (the ``request_url`` argument, ``None`` for a new query) and
    every URL actually served in ``urls``.
    """

    base_url = "http://inmemory/workflows"

    def __init__(
        self,
        records: Optional[Iterable[Union[Workflow, Mapping[str, Any]]]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.records: List[Workflow] = [
            r if isinstance(r, Workflow) else Workflow.model_validate(r)
            for r in records or []
        ]
        self.page_size = page_size
        self.calls: List[Optional[str]] = []
        self.urls: List[str] = []
        self.gate: Optional[asyncio.Event] = None
        self._failures: Deque[Exception] = deque()

    def fail_next(self, error: Exception) -> None:
        """Raise ``error`` from the next fetch instead of returning a page."""
        self._failures.append(error)

    async def fetch_page(
        self,
        sort: SortSpec,
        filters: FilterSet,
        request_url: Optional[str] = None,
    ) -> WorkflowPage:
        self.calls.append(request_url)
        if self.gate is not None:
            await self.gate.wait()
        if self._failures:
            raise self._failures.popleft()

        url = request_url or build_request_url(
            self.base_url, sort, filters, self.page_size
        )
        self.urls.append(url)
        parsed = httpx.URL(url)
        offset = int(parsed.params.get(SKIP_PARAM, "0"))
        end = offset + self.page_size
        next_cursor = None
        if end < len(self.records):
            next_cursor = str(parsed.copy_set_param(SKIP_PARAM, str(end)))
        return WorkflowPage(
            records=self.records[offset:end],
            next_cursor=next_cursor,
            total_count=len(self.records),
            request_url=url,
        )
