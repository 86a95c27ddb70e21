"""Base fetch client interface."""

from __future__ import annotations

import abc
from typing import Optional

from ..contracts import FilterSet, SortSpec, WorkflowPage


class BaseWorkflowClient(metaclass=abc.ABCMeta):
    """Abstract source of workflow pages."""

    @abc.abstractmethod
    async def fetch_page(
        self,
        sort: SortSpec,
        filters: FilterSet,
        request_url: Optional[str] = None,
    ) -> WorkflowPage:
        """Fetch one page of workflows.

        Args:
            sort: Ordering for a new query.
            filters: Constraints for a new query.
            request_url: Locator returned by a previous page. When given it is
                used verbatim and ``sort``/``filters`` are not re-applied.

        Raises:
            AuthError: If no credential could be obtained.
            FetchError: If the data request failed.
        """
        raise NotImplementedError
