"""Delivery detail form state."""

from __future__ import annotations

from blueflame.models import CustomerDetails

CUSTOMER_FIELDS = ("name", "email", "address")


class CustomerForm:
    """Holds the three delivery fields. Validation happens at checkout."""

    def __init__(self, details: CustomerDetails | None = None) -> None:
        self.details = details or CustomerDetails()

    def set_field(self, field: str, value: str) -> None:
        if field not in CUSTOMER_FIELDS:
            raise ValueError(f"unknown customer field: {field!r}")
        setattr(self.details, field, value)

    def get_field(self, field: str) -> str:
        if field not in CUSTOMER_FIELDS:
            raise ValueError(f"unknown customer field: {field!r}")
        return getattr(self.details, field)

    def is_complete(self) -> bool:
        # Whitespace-only values count as filled in.
        return all(getattr(self.details, field) != "" for field in CUSTOMER_FIELDS)
