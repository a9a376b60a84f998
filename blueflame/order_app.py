"""Main Textual app class."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from blueflame.checkout import CheckoutStatus
from blueflame.config import RESTAURANT_NAME, TAGLINE
from blueflame.debug_log import log_debug
from blueflame.details_modal import DetailsModal
from blueflame.models import CartLine
from blueflame.rendering import format_cart, format_category_bar, format_customer, format_menu
from blueflame.session import OrderSession


class OrderApp(App):
    """A Textual app for browsing the menu, building a cart and placing an order."""

    TITLE = RESTAURANT_NAME
    SUB_TITLE = "Order online"

    CSS = """
    Screen {
        layout: vertical;
    }

    #category-bar {
        height: 1;
        padding: 0 1;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #side-pane {
        width: 1fr;
    }

    #cart-pane {
        height: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #details-pane {
        height: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
    }

    #status-line {
        height: 1;
        padding: 0 1;
    }

    #tagline {
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    menu_index = reactive(0)
    cart_index = reactive(None)

    BINDINGS = [
        ("up", "move_menu(-1)", "Previous item"),
        ("down", "move_menu(1)", "Next item"),
        ("enter", "add_selected", "Add"),
        ("a", "add_selected", "Add"),
        ("left", "cycle_category(-1)", "Previous category"),
        ("right", "cycle_category(1)", "Next category"),
        ("c", "move_cart(1)", "Next cart line"),
        ("plus", "change_qty(1)", "Qty +"),
        ("equals_sign", "change_qty(1)", "Qty +"),
        ("minus", "change_qty(-1)", "Qty -"),
        ("e", "edit_details", "Your details"),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: OrderSession | None = None) -> None:
        super().__init__()
        self.session = session or OrderSession()
        self.system_status = ""
        self.session.checkout_flow.on_state_change = lambda _state: self._refresh_cart()
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="category-bar")
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="side-pane"):
                with Vertical(id="cart-pane"):
                    yield Static("Your Order", classes="pane-title")
                    yield Static(id="cart-list")
                with Vertical(id="details-pane"):
                    yield Static("Your Details", classes="pane-title")
                    yield Static(id="details-summary")
        yield Static(id="status-line")
        yield Static(TAGLINE, id="tagline")

    def on_mount(self) -> None:
        self._refresh_all()
        self.run_worker(self._load_menu(), group="menu", exclusive=True)

    async def on_unmount(self) -> None:
        log_debug("app_unmount")
        await self.session.close()

    async def _load_menu(self) -> None:
        loaded = await self.session.load_menu()
        if not loaded:
            return
        self.menu_index = 0
        self._refresh_all()

    def action_move_menu(self, delta: int) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        items = self.session.visible_items()
        if not items:
            return
        self.menu_index = (self.menu_index + delta) % len(items)
        self._refresh_menu()

    def action_cycle_category(self, delta: int) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        category = self.session.cycle_category(delta)
        self.menu_index = 0
        log_debug(f"category_selected category={category!r}")
        self._refresh_category_bar()
        self._refresh_menu()

    def action_add_selected(self) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        items = self.session.visible_items()
        if not items:
            return
        item = items[min(self.menu_index, len(items) - 1)]
        self.session.cart.add(item)
        lines = self.session.cart.lines
        self.cart_index = next(idx for idx, line in enumerate(lines) if line.item_id == item.item_id)
        log_debug(f"cart_add item_id={item.item_id!r}")
        self._refresh_cart()

    def action_move_cart(self, delta: int) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        count = len(self.session.cart)
        if not count:
            return
        if self.cart_index is None:
            self.cart_index = 0 if delta > 0 else count - 1
        else:
            self.cart_index = (self.cart_index + delta) % count
        self._refresh_cart()

    def action_change_qty(self, delta: int) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        line = self._selected_line()
        if line is None:
            return
        if delta > 0:
            self.session.cart.increment(line.item_id)
        else:
            self.session.cart.decrement(line.item_id)
        self._refresh_cart()

    def action_edit_details(self) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        self.push_screen(DetailsModal(self.session.customer.details), self._apply_details)

    def _apply_details(self, values: dict[str, str] | None) -> None:
        if values is None:
            return
        for field, value in values.items():
            if value != self.session.customer.get_field(field):
                self.session.customer.set_field(field, value)
        self._refresh_details()

    def action_checkout(self) -> None:
        if isinstance(self.screen, DetailsModal):
            return
        if self.session.checkout_flow.is_submitting:
            log_debug("checkout_ignored reason=submitting")
            return
        self.run_worker(self._checkout(), group="checkout")

    async def _checkout(self) -> None:
        result = await self.session.checkout()
        if result.status is CheckoutStatus.BUSY:
            return
        if result.status is CheckoutStatus.PLACED:
            self.cart_index = None
        self.system_status = result.message
        self._refresh_all()

    def _selected_line(self) -> CartLine | None:
        lines = self.session.cart.lines
        if self.cart_index is None or not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index]

    def _refresh_all(self) -> None:
        self._refresh_category_bar()
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_details()
        self._refresh_status()

    def _refresh_category_bar(self) -> None:
        try:
            bar = self.query_one("#category-bar", Static)
        except NoMatches:
            return
        bar.update(format_category_bar(self.session.menu.categories(), self.session.category))

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        items = self.session.visible_items()
        if items and self.menu_index >= len(items):
            self.menu_index = 0
        menu_widget.update(format_menu(items, self.menu_index if items else None))

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
        except NoMatches:
            return
        cart = self.session.cart
        if cart.is_empty():
            self.cart_index = None
        cart_widget.update(
            format_cart(
                cart.lines,
                cart.totals(),
                self.cart_index,
                submitting=self.session.checkout_flow.is_submitting,
            )
        )

    def _refresh_details(self) -> None:
        try:
            details_widget = self.query_one("#details-summary", Static)
        except NoMatches:
            return
        details = self.session.customer.details
        details_widget.update(format_customer(details.name, details.email, details.address))

    def _refresh_status(self) -> None:
        try:
            status_widget = self.query_one("#status-line", Static)
        except NoMatches:
            return
        status_widget.update(self.system_status or "Ready")
