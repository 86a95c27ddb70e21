"""Exceptions raised while talking to the workflow data API."""

from __future__ import annotations

from typing import Optional


class FlowdeckError(Exception):
    """Base class for flowdeck failures."""

    def __init__(
        self, message: str, status_code: Optional[int] = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthError(FlowdeckError):
    """The credential endpoint failed or returned an unusable payload."""


class FetchError(FlowdeckError):
    """The data endpoint failed or returned an unusable payload."""
