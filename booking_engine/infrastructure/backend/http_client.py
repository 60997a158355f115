from __future__ import annotations

import logging
from typing import Any

import httpx

from booking_engine.application.exceptions import BackendUnavailableError
from booking_engine.core.config import settings


class BackendClient:
    """Thin JSON client for the booking backend. Every transport problem surfaces as BackendUnavailableError."""

    def __init__(
        self,
        base_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BACKEND_BASE_URL).rstrip("/")
        self._api_token = api_token if api_token is not None else settings.BACKEND_API_TOKEN
        self._timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    def _headers(self, business_id: str | None = None) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        if business_id:
            headers["x-business-id"] = business_id
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout, transport=self._transport)

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        try:
            async with self._client() as client:
                response = await client.get(path, params=query, headers=self._headers())
        except httpx.HTTPError as e:
            raise BackendUnavailableError(f"GET {path} failed: {e}") from e

        if response.status_code >= 400:
            raise BackendUnavailableError(f"GET {path} returned {response.status_code}")
        if not response.content:
            raise BackendUnavailableError(f"GET {path} returned an empty body")
        try:
            data = response.json()
        except ValueError as e:
            raise BackendUnavailableError(f"GET {path} returned invalid JSON") from e
        if not isinstance(data, dict):
            raise BackendUnavailableError(f"GET {path} returned {type(data).__name__}, expected an object")
        return data

    async def post_json(
        self,
        path: str,
        payload: dict[str, Any],
        business_id: str | None = None,
    ) -> httpx.Response:
        """Returns the raw response; callers decide how to interpret non-2xx bodies."""
        try:
            async with self._client() as client:
                return await client.post(path, json=payload, headers=self._headers(business_id))
        except httpx.HTTPError as e:
            self._logger.error("Backend POST failed", extra={"reason": path, "error": str(e)})
            raise BackendUnavailableError(f"POST {path} failed: {e}") from e
