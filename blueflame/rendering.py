"""Rich text builders for menu cards, the cart panel and the category bar."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from blueflame.config import CURRENCY_SYMBOL
from blueflame.models import CartLine, MenuItem
from blueflame.totals import CartTotals, round_cents


def format_money(amount: Decimal) -> str:
    """Format an amount as dollars with two decimals."""
    return f"{CURRENCY_SYMBOL}{round_cents(amount):.2f}"


def category_badge(category: str) -> Text:
    """Render a category as a compact colored tag."""
    return Text(f" {category} ", style="#9ec5ff on #1e2a3d")


def format_category_bar(categories: list[str], selected: str) -> Text:
    """Render the category navigation with the selected entry highlighted."""
    text = Text()
    for idx, category in enumerate(categories):
        if idx > 0:
            text.append("  ")
        if category == selected:
            text.append(category, style="bold white underline")
        else:
            text.append(category, style="#9ec5ff")
    return text


def format_menu_card(item: MenuItem, selected: bool = False) -> Text:
    """Render one menu item with price, description, badge and image hint."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(item.name, style="bold white")
    text.append("  ")
    text.append(format_money(item.price), style="#9ec5ff")
    text.append("\n    ")
    text.append(item.description or "", style="#b8c7e0")
    text.append("\n    ")
    text.append_text(category_badge(item.category))
    text.append("  ")
    if item.image:
        text.append(item.image, style="dim")
    else:
        text.append("No image", style="dim")
    return text


def format_menu(items: list[MenuItem], selected_index: int | None) -> Text:
    """Render the visible menu, or the loading placeholder when it is empty."""
    if not items:
        return Text("Loading menu...", style="#9ec5ff")

    text = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            text.append("\n\n")
        text.append_text(format_menu_card(item, selected=idx == selected_index))
    return text


def format_cart_line(line: CartLine, selected: bool = False) -> Text:
    """Render one cart line with unit price and quantity controls."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(line.name, style="bold white")
    text.append(f"  {format_money(line.price)}", style="#b8c7e0")
    text.append(f"   - {line.qty} +", style="white")
    return text


def format_cart(
    lines: list[CartLine],
    totals: CartTotals,
    selected_index: int | None,
    submitting: bool = False,
) -> Text:
    """Render the order panel, or the empty placeholder when nothing is added."""
    if not lines:
        return Text("No items yet.", style="#b8c7e0")

    text = Text()
    for idx, line in enumerate(lines):
        if idx > 0:
            text.append("\n")
        text.append_text(format_cart_line(line, selected=idx == selected_index))

    text.append("\n\n")
    text.append(f"Subtotal  {format_money(totals.subtotal)}\n", style="#9ec5ff")
    text.append(f"Tax       {format_money(totals.tax)}\n", style="#9ec5ff")
    text.append(f"Total     {format_money(totals.total)}\n", style="bold white")
    text.append("\n")
    label = "Placing Order..." if submitting else "Checkout (Ctrl+S)"
    text.append(f"[ {label} ]", style="dim" if submitting else "bold #0b1f0f on #5fbf72")
    return text


def format_customer(name: str, email: str, address: str) -> Text:
    """Render the delivery details summary."""
    text = Text()
    for label, value in (("Name", name), ("Email", email), ("Address", address)):
        text.append(f"{label}: ", style="#9ec5ff")
        text.append(value or "-", style="white" if value else "dim")
        text.append("\n")
    text.append("Press E to edit", style="dim")
    return text
