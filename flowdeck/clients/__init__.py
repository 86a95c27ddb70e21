"""Fetch client factory and initialization."""

from __future__ import annotations

import os
from typing import Optional

from ..auth import TokenProvider
from ..config import FlowdeckConfig, load_config
from .base import BaseWorkflowClient
from .dataverse import DataverseClient
from .inmemory import InMemoryWorkflowClient

_client_instance: BaseWorkflowClient | None = None


def get_client(
    backend: Optional[str] = None, config: Optional[FlowdeckConfig] = None
) -> BaseWorkflowClient:
    """Factory function to get the configured fetch client.

    A client registered in ``_client_instance`` is reused when neither
    ``backend`` nor ``config`` is given.
    """

    global _client_instance
    if _client_instance is not None and backend is None and config is None:
        return _client_instance

    config = config or load_config()
    backend = (
        backend or os.getenv("FLOWDECK_BACKEND") or config.client.backend
    ).lower()

    if backend == "inmemory":
        _client_instance = InMemoryWorkflowClient(page_size=config.api.page_size)
    elif backend == "dataverse":
        api = config.api
        if not api.token_url:
            raise ValueError("Dataverse backend requires api.token_url")
        _client_instance = DataverseClient(
            data_url=api.data_url,
            tokens=TokenProvider(api.token_url, timeout=api.timeout),
            page_size=api.page_size,
            timeout=api.timeout,
        )
    else:
        raise ValueError(f"Unsupported client backend: {backend}")

    return _client_instance


__all__ = [
    "BaseWorkflowClient",
    "DataverseClient",
    "InMemoryWorkflowClient",
    "get_client",
]
