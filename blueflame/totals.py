"""Cart money math: subtotal, tax and total."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from blueflame.config import TAX_RATE
from blueflame.models import CartLine

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def compute_totals(lines: Iterable[CartLine], tax_rate: Decimal = TAX_RATE) -> CartTotals:
    """Compute totals for cart lines.

    Tax is rounded to cents on its own before it is added to the subtotal,
    and the sum is rounded again. The subtotal keeps full precision.
    """
    subtotal = sum((line.price * line.qty for line in lines), Decimal("0"))
    tax = round_cents(subtotal * tax_rate)
    total = round_cents(subtotal + tax)
    return CartTotals(subtotal=subtotal, tax=tax, total=total)
