"""
Supabase (PostgREST) client for the read-only admin views.
"""

from __future__ import annotations

from typing import Any

import httpx

from inzo_bot.core.exceptions import DataStoreError
from inzo_bot.core.logging import get_logger

logger = get_logger(__name__)


def _parse_total(content_range: str | None) -> int:
    """Read the total from a Content-Range header such as ``0-4/12``."""
    if not content_range or "/" not in content_range:
        return 0
    total = content_range.rsplit("/", 1)[1].strip()
    try:
        return int(total)
    except ValueError:
        return 0


class SupabaseStore:
    """Read-only client for the Supabase REST API."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise DataStoreError("SUPABASE_URL is not configured")
        if not service_key:
            raise DataStoreError("SUPABASE_SERVICE_ROLE_KEY is not configured")
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": service_key,
                "Authorization": f"Bearer {service_key}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _params(
        columns: str | None,
        filters: dict[str, Any] | None,
        order_by: str | None = None,
        descending: bool = True,
        limit: int | None = None,
    ) -> dict[str, str]:
        params: dict[str, str] = {}
        if columns:
            params["select"] = columns
        for column, value in (filters or {}).items():
            if isinstance(value, bool):
                value = str(value).lower()
            params[column] = f"eq.{value}"
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)
        return params

    async def _request(
        self,
        method: str,
        table: str,
        params: dict[str, str],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, f"/{table}", params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Supabase error %s on %s: %s", exc.response.status_code, table, exc.response.text
            )
            raise DataStoreError(f"Supabase error: {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("Supabase request to %s failed: %s", table, exc)
            raise DataStoreError("Supabase request failed") from exc
        return response

    @staticmethod
    def _rows(response: httpx.Response) -> list[dict[str, Any]]:
        try:
            data = response.json()
        except ValueError as exc:
            raise DataStoreError("Supabase returned invalid JSON") from exc
        if not isinstance(data, list):
            raise DataStoreError("Supabase returned unexpected payload")
        return data

    async def select(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Select rows with equality filters, optional ordering and row limit.

        Args:
            table: Table name
            columns: PostgREST select expression, may embed a join
                such as ``*, profiles(full_name, phone)``
            filters: Column -> value equality filters
            order_by: Column to order by
            descending: Sort direction for ``order_by``
            limit: Maximum number of rows

        Raises:
            DataStoreError: If the query fails
        """
        params = self._params(columns, filters, order_by, descending, limit)
        response = await self._request("GET", table, params)
        return self._rows(response)

    async def select_with_count(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = True,
        limit: int | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """Select rows and the exact total of rows matching the filters."""
        params = self._params(columns, filters, order_by, descending, limit)
        response = await self._request("GET", table, params, headers={"Prefer": "count=exact"})
        return self._rows(response), _parse_total(response.headers.get("Content-Range"))

    async def count(self, table: str, *, filters: dict[str, Any] | None = None) -> int:
        """Count rows matching the filters without fetching them."""
        params = self._params("*", filters)
        response = await self._request("HEAD", table, params, headers={"Prefer": "count=exact"})
        return _parse_total(response.headers.get("Content-Range"))

    async def maybe_single(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a single row, or None when the table has none."""
        params = self._params(columns, filters, limit=1)
        response = await self._request("GET", table, params)
        rows = self._rows(response)
        return rows[0] if rows else None
