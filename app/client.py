"""Async HTTP client for the listings API.

Usage::

    async with PropertiesClient("http://localhost:3000") as client:
        listings = await client.list(city="paris", type="sale")
        created = await client.create({...})
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, error: str, details: list[dict] | None = None):
        super().__init__(f"{status_code}: {error}")
        self.status_code = status_code
        self.error = error
        self.details = details or []

    def field_errors(self) -> dict[str, str]:
        """Map each rejected field to its message, as a form would display them."""
        return {d.get("field", ""): d.get("message", "") for d in self.details}


class PropertiesClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/api",
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> PropertiesClient:
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        r = await self._client.request(method, url, **kwargs)
        if r.is_success:
            return r.json()
        try:
            body = r.json()
        except ValueError:
            body = {}
        error = body.get("error", r.reason_phrase) if isinstance(body, dict) else r.reason_phrase
        details = body.get("details") if isinstance(body, dict) else None
        logger.error("API error %s %s -> %s: %s", method, url, r.status_code, error)
        raise ApiError(r.status_code, error, details)

    async def list(
        self,
        city: str | None = None,
        type: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> list[dict]:
        # falsy filters are left out of the query string
        params = {}
        if city:
            params["city"] = city
        if type:
            params["type"] = type
        if min_price:
            params["minPrice"] = min_price
        if max_price:
            params["maxPrice"] = max_price
        return await self._request("GET", "/properties", params=params)

    async def get(self, property_id: str) -> dict:
        return await self._request("GET", f"/properties/{property_id}")

    async def create(self, data: dict) -> dict:
        return await self._request("POST", "/properties", json=data)

    async def update(self, property_id: str, data: dict) -> dict:
        return await self._request("PUT", f"/properties/{property_id}", json=data)

    async def delete(self, property_id: str) -> None:
        await self._request("DELETE", f"/properties/{property_id}")
