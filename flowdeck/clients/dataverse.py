"""Dataverse Web API client for workflow records."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..auth import TokenProvider
from ..constants import COUNT_FIELD, DEFAULT_PAGE_SIZE, NEXT_LINK_FIELD, ODATA_HEADERS
from ..contracts import FilterSet, SortSpec, Workflow, WorkflowPage
from ..errors import FetchError
from ..query import build_request_url
from .base import BaseWorkflowClient

logger = logging.getLogger(__name__)


class DataverseClient(BaseWorkflowClient):
    """Fetch workflow pages from a Dataverse ``workflows`` entity set."""

    def __init__(
        self,
        data_url: str,
        tokens: TokenProvider,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not data_url:
            raise ValueError("Dataverse client requires a data URL")
        self.data_url = data_url
        self.page_size = page_size
        self.timeout = timeout
        self._tokens = tokens
        self._http = http_client

    async def fetch_page(
        self,
        sort: SortSpec,
        filters: FilterSet,
        request_url: Optional[str] = None,
    ) -> WorkflowPage:
        token = await self._tokens.get_token()
        url = request_url or build_request_url(
            self.data_url, sort, filters, self.page_size
        )
        data = await self._get_json(url, token)

        try:
            page = WorkflowPage(
                records=[Workflow.model_validate(row) for row in data.get("value") or []],
                next_cursor=data.get(NEXT_LINK_FIELD) or None,
                total_count=data.get(COUNT_FIELD) or 0,
                request_url=url,
            )
        except ValidationError as e:
            raise FetchError(f"Malformed workflow response: {e}") from e

        logger.info(f"Fetched {len(page.records)} workflows")
        return page

    async def _get_json(self, url: str, token: str) -> Dict[str, Any]:
        logger.debug(f"Fetching workflows from: {url}")
        headers = {"Authorization": f"Bearer {token}", **ODATA_HEADERS}
        try:
            if self._http is not None:
                response = await self._http.get(url, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach data endpoint: {e}")
            raise FetchError(f"Could not reach data endpoint: {e}") from e

        if not response.is_success:
            logger.error(f"Failed to fetch workflows: {response.text}")
            raise FetchError(
                f"HTTP error {response.status_code} while fetching workflows.",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(
                "Data endpoint returned a non-JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from e
        if not isinstance(data, dict):
            raise FetchError(
                "Data endpoint returned an unexpected payload",
                status_code=response.status_code,
                body=response.text,
            )
        return data
