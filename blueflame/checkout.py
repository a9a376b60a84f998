"""Checkout state machine: validate, submit, reconcile the cart."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable

from blueflame.api import BackendClient
from blueflame.cart import CartStore
from blueflame.config import CURRENCY_SYMBOL
from blueflame.customer import CustomerForm
from blueflame.debug_log import log_debug
from blueflame.errors import OrderRejected, TransportFailure, ValidationFailure
from blueflame.models import OrderRequest

EMPTY_CART_MESSAGE = "Add some items first"
MISSING_DETAILS_MESSAGE = "Enter your details"
NETWORK_ERROR_MESSAGE = "Network error placing order"


class CheckoutState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class CheckoutStatus(Enum):
    PLACED = "placed"
    VALIDATION = "validation"
    REJECTED = "rejected"
    NETWORK_ERROR = "network_error"
    BUSY = "busy"


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of one checkout trigger, for the UI to present."""

    status: CheckoutStatus
    message: str
    total: Decimal | None = None

    @property
    def ok(self) -> bool:
        return self.status is CheckoutStatus.PLACED


class CheckoutOrchestrator:
    """Runs at most one order submission at a time.

    Triggers that arrive while a submission is in flight are rejected with a
    BUSY result instead of being queued.
    """

    def __init__(
        self,
        client: BackendClient,
        on_state_change: Callable[[CheckoutState], None] | None = None,
    ) -> None:
        self.client = client
        self.on_state_change = on_state_change
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state is CheckoutState.SUBMITTING

    def _set_state(self, state: CheckoutState) -> None:
        self._state = state
        if self.on_state_change is not None:
            self.on_state_change(state)

    def validate(self, cart: CartStore, customer: CustomerForm) -> None:
        if cart.is_empty():
            raise ValidationFailure(EMPTY_CART_MESSAGE)
        if not customer.is_complete():
            raise ValidationFailure(MISSING_DETAILS_MESSAGE)

    async def checkout(self, cart: CartStore, customer: CustomerForm) -> CheckoutResult:
        if self.is_submitting:
            log_debug("checkout_blocked reason=submitting")
            return CheckoutResult(CheckoutStatus.BUSY, "Placing Order...")

        try:
            self.validate(cart, customer)
        except ValidationFailure as exc:
            log_debug(f"checkout_blocked reason=validation message={exc}")
            return CheckoutResult(CheckoutStatus.VALIDATION, str(exc))

        request = OrderRequest.build(cart.lines, customer.details)
        self._set_state(CheckoutState.SUBMITTING)
        log_debug(f"checkout_submit lines={len(request.items)}")
        try:
            total = await self.client.create_order(request)
        except OrderRejected as exc:
            log_debug(f"checkout_rejected status={exc.status_code} detail={exc.detail!r}")
            return CheckoutResult(CheckoutStatus.REJECTED, f"Failed to place order: {exc.reason}")
        except TransportFailure as exc:
            log_debug(f"checkout_network_error error={exc}")
            return CheckoutResult(CheckoutStatus.NETWORK_ERROR, NETWORK_ERROR_MESSAGE)
        finally:
            self._set_state(CheckoutState.IDLE)

        cart.clear()
        log_debug(f"checkout_placed total={total}")
        return CheckoutResult(CheckoutStatus.PLACED, f"Order placed! Total {CURRENCY_SYMBOL}{total}", total=total)
