"""HTTP client for the restaurant backend."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import httpx

from blueflame import config
from blueflame.errors import LoadFailure, OrderRejected, TransportFailure
from blueflame.models import MenuItem, OrderRequest, to_decimal


class BackendClient:
    """Thin async wrapper over the menu and order endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or config.BACKEND_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_menu(self) -> list[MenuItem]:
        try:
            resp = await self._client.get("/api/menu")
        except httpx.RequestError as exc:
            raise LoadFailure(f"menu fetch failed: {exc!r}") from exc
        if not resp.is_success:
            raise LoadFailure(f"menu fetch status={resp.status_code}")
        try:
            payload = resp.json()
            return [MenuItem.from_payload(entry) for entry in payload]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise LoadFailure(f"menu payload invalid: {exc!r}") from exc

    async def seed_menu(self) -> None:
        """Ask the backend to populate an empty catalog. The body is ignored."""
        try:
            resp = await self._client.post("/api/menu/seed")
        except httpx.RequestError as exc:
            raise LoadFailure(f"menu seed failed: {exc!r}") from exc
        if not resp.is_success:
            raise LoadFailure(f"menu seed status={resp.status_code}")

    async def create_order(self, request: OrderRequest) -> Decimal:
        """Submit an order and return the server-reported total."""
        try:
            resp = await self._client.post("/api/orders", json=request.to_payload())
        except httpx.RequestError as exc:
            raise TransportFailure(f"order request failed: {exc!r}") from exc

        if not resp.is_success:
            raise OrderRejected(resp.status_code, _error_detail(resp))

        try:
            return to_decimal(resp.json()["total"])
        except (ValueError, KeyError, TypeError) as exc:
            raise OrderRejected(resp.status_code, "invalid order response") from exc


def _error_detail(resp: httpx.Response) -> str | None:
    try:
        body: Any = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return None
