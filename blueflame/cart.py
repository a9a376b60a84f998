"""Cart line items for the current session."""

from __future__ import annotations

from blueflame.models import CartLine, MenuItem
from blueflame.totals import CartTotals, compute_totals


class CartStore:
    """Ordered cart lines, one per distinct menu item id.

    Lines keep the order of their first add. Quantities never drop below 1;
    lines only disappear through clear() after a placed order.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def line_for(self, item_id: str) -> CartLine | None:
        for line in self._lines:
            if line.item_id == item_id:
                return line
        return None

    def add(self, item: MenuItem) -> CartLine:
        existing = self.line_for(item.item_id)
        if existing is not None:
            existing.qty += 1
            return existing
        line = CartLine(item_id=item.item_id, name=item.name, price=item.price, qty=1)
        self._lines.append(line)
        return line

    def set_quantity(self, item_id: str, qty: int) -> None:
        line = self.line_for(item_id)
        if line is None:
            return
        line.qty = max(1, int(qty))

    def increment(self, item_id: str) -> None:
        line = self.line_for(item_id)
        if line is not None:
            self.set_quantity(item_id, line.qty + 1)

    def decrement(self, item_id: str) -> None:
        line = self.line_for(item_id)
        if line is not None:
            self.set_quantity(item_id, line.qty - 1)

    def clear(self) -> None:
        self._lines.clear()

    def item_count(self) -> int:
        return sum(line.qty for line in self._lines)

    def totals(self) -> CartTotals:
        return compute_totals(self._lines)
