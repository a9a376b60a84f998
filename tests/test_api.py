"""
Tests for the backend HTTP client.
"""

import asyncio
from decimal import Decimal

import httpx
import pytest

from blueflame.api import BackendClient
from blueflame.errors import LoadFailure, OrderRejected, TransportFailure
from blueflame.loader import CancelToken, MenuLoader
from blueflame.menu import MenuStore
from blueflame.models import CartLine, CustomerDetails, OrderRequest

from conftest import FakeBackend


def sample_request() -> OrderRequest:
    lines = [
        CartLine(item_id="burger", name="Flame Burger", price=Decimal("10.00"), qty=2),
        CartLine(item_id="fries", name="Blue Fries", price=Decimal("3.33"), qty=1),
    ]
    customer = CustomerDetails(name="Ann", email="ann@example.test", address="1 Main St")
    return OrderRequest.build(lines, customer)


async def _call(backend: FakeBackend, method: str, *args):
    client = backend.client()
    try:
        return await getattr(client, method)(*args)
    finally:
        await client.aclose()


class TestMenuEndpoints:
    def test_fetch_menu_parses_items(self, backend):
        items = asyncio.run(_call(backend, "fetch_menu"))

        assert [item.item_id for item in items] == ["burger", "fries", "double"]
        assert items[1].price == Decimal("3.33")
        assert backend.calls == [("GET", "/api/menu")]

    def test_fetch_menu_non_success_is_load_failure(self):
        backend = FakeBackend(menu_status=500)

        with pytest.raises(LoadFailure):
            asyncio.run(_call(backend, "fetch_menu"))

    def test_non_finite_price_is_load_failure(self):
        body = b'[{"id": "x", "name": "X", "description": "", "price": NaN, "category": "C"}]'
        client = BackendClient(
            "http://backend.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, content=body)),
        )

        async def scenario():
            store = MenuStore()
            try:
                loaded = await MenuLoader(client).load(store, CancelToken())
            finally:
                await client.aclose()
            return store, loaded

        store, loaded = asyncio.run(scenario())

        assert loaded is False
        assert store.items == []

    def test_seed_posts_once(self, backend):
        asyncio.run(_call(backend, "seed_menu"))

        assert backend.calls == [("POST", "/api/menu/seed")]


class TestCreateOrder:
    def test_payload_carries_ids_and_quantities_only(self, backend):
        total = asyncio.run(_call(backend, "create_order", sample_request()))

        assert total == Decimal("25.2")
        assert backend.order_payloads == [
            {
                "customer_name": "Ann",
                "customer_email": "ann@example.test",
                "customer_address": "1 Main St",
                "items": [
                    {"item_id": "burger", "quantity": 2},
                    {"item_id": "fries", "quantity": 1},
                ],
            }
        ]

    def test_rejection_carries_detail(self):
        backend = FakeBackend(order_status=400, order_body={"detail": "Item not found"})

        with pytest.raises(OrderRejected) as excinfo:
            asyncio.run(_call(backend, "create_order", sample_request()))

        assert excinfo.value.status_code == 400
        assert excinfo.value.reason == "Item not found"

    def test_rejection_without_json_uses_status(self):
        backend = FakeBackend(order_status=502, order_raw_body=b"<html>bad gateway</html>")

        with pytest.raises(OrderRejected) as excinfo:
            asyncio.run(_call(backend, "create_order", sample_request()))

        assert excinfo.value.detail is None
        assert excinfo.value.reason == "502"

    def test_connection_error_is_transport_failure(self):
        backend = FakeBackend(order_error=True)

        with pytest.raises(TransportFailure):
            asyncio.run(_call(backend, "create_order", sample_request()))

    def test_non_finite_total_is_rejected(self):
        backend = FakeBackend(order_raw_body=b'{"total": NaN}')

        with pytest.raises(OrderRejected) as excinfo:
            asyncio.run(_call(backend, "create_order", sample_request()))

        assert excinfo.value.reason == "invalid order response"
