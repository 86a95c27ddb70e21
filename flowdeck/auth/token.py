"""Bearer credential retrieval for the data API."""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from ..errors import AuthError

logger = logging.getLogger(__name__)

TOKEN_FIELDS = ("token", "accessToken")


def parse_token_response(text: str) -> str:
    """Extract the bearer token from a credential endpoint response body.

    The endpoint either answers with the bare token as plain text or with a
    JSON object carrying it under ``token`` or ``accessToken``.
    """
    try:
        data = json.loads(text)
    except ValueError:
        data = text

    if isinstance(data, dict):
        for field in TOKEN_FIELDS:
            value = data.get(field)
            if isinstance(value, str) and value:
                logger.debug(f"Received auth token from JSON response (key: {field})")
                return value
        raise AuthError(
            "Token response did not contain a 'token' or 'accessToken' field",
            body=text,
        )

    if not isinstance(data, str):
        raise AuthError("Token response was not a token string or JSON object", body=text)

    token = data.strip()
    if not token:
        raise AuthError("Token response was empty", body=text)
    logger.debug("Received auth token as plain text")
    return token


class TokenProvider:
    """Fetches a fresh bearer token from the credential endpoint.

    Tokens are not cached: every call issues a new credential request.
    """

    def __init__(
        self,
        token_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.token_url = token_url
        self.timeout = timeout
        self._http = http_client

    async def get_token(self) -> str:
        logger.info("Requesting auth token...")
        try:
            if self._http is not None:
                response = await self._post(self._http)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client)
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach token endpoint: {e}")
            raise AuthError(f"Could not reach token endpoint: {e}") from e

        if not response.is_success:
            logger.error(f"Failed to get auth token: {response.text}")
            raise AuthError(
                f"HTTP error {response.status_code} while fetching token.",
                status_code=response.status_code,
                body=response.text,
            )
        return parse_token_response(response.text)

    async def _post(self, client: httpx.AsyncClient) -> httpx.Response:
        return await client.post(
            self.token_url,
            json={},
            headers={"Content-Type": "application/json"},
        )
