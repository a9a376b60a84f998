"""Domain models for the Blue Flame order client."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping


def to_decimal(value: Any) -> Decimal:
    """Convert a JSON number (or numeric string) to a finite Decimal without float noise."""
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"not a finite amount: {value!r}")
    return result


@dataclass(frozen=True)
class MenuItem:
    """A catalog entry as served by the backend."""

    item_id: str
    name: str
    description: str
    price: Decimal
    category: str
    image: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MenuItem:
        price = to_decimal(payload.get("price", 0))
        if price < 0:
            raise ValueError(f"negative price for menu item {payload.get('id')!r}")
        return cls(
            item_id=str(payload["id"]),
            name=str(payload.get("name", "")),
            description=str(payload.get("description") or ""),
            price=price,
            category=str(payload.get("category", "")),
            image=payload.get("image") or None,
        )


@dataclass
class CartLine:
    """One distinct menu item in the cart with its aggregated quantity."""

    item_id: str
    name: str
    price: Decimal
    qty: int = 1


@dataclass
class CustomerDetails:
    """Delivery details collected before checkout."""

    name: str = ""
    email: str = ""
    address: str = ""


@dataclass(frozen=True)
class OrderRequestLine:
    item_id: str
    quantity: int


@dataclass(frozen=True)
class OrderRequest:
    """Order body built at checkout time. Prices are priced by the backend."""

    customer_name: str
    customer_email: str
    customer_address: str
    items: tuple[OrderRequestLine, ...]

    @classmethod
    def build(cls, lines: list[CartLine], customer: CustomerDetails) -> OrderRequest:
        return cls(
            customer_name=customer.name,
            customer_email=customer.email,
            customer_address=customer.address,
            items=tuple(OrderRequestLine(line.item_id, line.qty) for line in lines),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "customer_address": self.customer_address,
            "items": [{"item_id": line.item_id, "quantity": line.quantity} for line in self.items],
        }
