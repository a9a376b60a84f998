"""Owned order state for one running client session."""

from __future__ import annotations

from blueflame.api import BackendClient
from blueflame.cart import CartStore
from blueflame.checkout import CheckoutOrchestrator, CheckoutResult
from blueflame.config import ALL_CATEGORIES
from blueflame.customer import CustomerForm
from blueflame.loader import CancelToken, MenuLoader
from blueflame.menu import MenuStore
from blueflame.models import MenuItem


class OrderSession:
    """Menu, cart, customer details and checkout wired to one backend client.

    The UI reads from this object and calls its operations; it holds no
    order state of its own.
    """

    def __init__(self, client: BackendClient | None = None) -> None:
        self.client = client or BackendClient()
        self.menu = MenuStore()
        self.cart = CartStore()
        self.customer = CustomerForm()
        self.loader = MenuLoader(self.client)
        self.checkout_flow = CheckoutOrchestrator(self.client)
        self.token = CancelToken()
        self._category = ALL_CATEGORIES

    @property
    def category(self) -> str:
        # Falls back to "All" when a reload dropped the selected category.
        if self._category not in self.menu.categories():
            return ALL_CATEGORIES
        return self._category

    def select_category(self, category: str) -> None:
        if category in self.menu.categories():
            self._category = category
        else:
            self._category = ALL_CATEGORIES

    def cycle_category(self, delta: int) -> str:
        categories = self.menu.categories()
        idx = categories.index(self.category)
        self._category = categories[(idx + delta) % len(categories)]
        return self._category

    def visible_items(self) -> list[MenuItem]:
        return self.menu.filtered_view(self.category)

    async def load_menu(self) -> bool:
        return await self.loader.load(self.menu, self.token)

    async def checkout(self) -> CheckoutResult:
        return await self.checkout_flow.checkout(self.cart, self.customer)

    async def close(self) -> None:
        self.token.cancel()
        await self.client.aclose()
