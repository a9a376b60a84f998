from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
import pytest

from blueflame import config
from blueflame.api import BackendClient

SAMPLE_MENU = [
    {
        "id": "burger",
        "name": "Flame Burger",
        "description": "Char-grilled beef, cheddar, pickles",
        "price": 10.0,
        "category": "Burgers",
        "image": "https://example.test/burger.jpg",
    },
    {
        "id": "fries",
        "name": "Blue Fries",
        "description": "Crispy fries with smoked salt",
        "price": 3.33,
        "category": "Sides",
    },
    {
        "id": "double",
        "name": "Double Flame",
        "description": "Two patties",
        "price": 13.5,
        "category": "Burgers",
        "image": None,
    },
]


class FakeBackend:
    """In-memory backend served through httpx.MockTransport."""

    def __init__(
        self,
        menu: list[dict] | None = None,
        seeded_menu: list[dict] | None = None,
        menu_status: int = 200,
        order_status: int = 200,
        order_body: dict | None = None,
        order_raw_body: bytes | None = None,
        order_error: bool = False,
        order_delay: float = 0.0,
    ) -> None:
        self.menu = list(SAMPLE_MENU if menu is None else menu)
        self.seeded_menu = list(SAMPLE_MENU if seeded_menu is None else seeded_menu)
        self.menu_status = menu_status
        self.order_status = order_status
        self.order_body = order_body if order_body is not None else {"total": 25.2, "id": "ord-1"}
        self.order_raw_body = order_raw_body
        self.order_error = order_error
        self.order_delay = order_delay
        self.calls: list[tuple[str, str]] = []
        self.order_payloads: list[dict] = []
        self.on_seed = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))

        if request.method == "GET" and path == "/api/menu":
            return httpx.Response(self.menu_status, json=self.menu)

        if request.method == "POST" and path == "/api/menu/seed":
            self.menu = list(self.seeded_menu)
            if self.on_seed is not None:
                self.on_seed()
            return httpx.Response(200, json={"seeded": len(self.menu)})

        if request.method == "POST" and path == "/api/orders":
            if self.order_delay:
                await asyncio.sleep(self.order_delay)
            if self.order_error:
                raise httpx.ConnectError("connection refused", request=request)
            self.order_payloads.append(json.loads(request.content))
            if self.order_raw_body is not None:
                return httpx.Response(self.order_status, content=self.order_raw_body)
            return httpx.Response(self.order_status, json=self.order_body)

        return httpx.Response(404, json={"detail": "Not Found"})

    def count(self, method: str, path: str) -> int:
        return sum(1 for call in self.calls if call == (method, path))

    def client(self) -> BackendClient:
        return BackendClient("http://backend.test", transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    return path


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
