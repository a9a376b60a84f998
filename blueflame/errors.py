"""Failure types raised by the backend client and the checkout flow."""

from __future__ import annotations


class OrderClientError(Exception):
    """Base class for every handled failure in the order client."""


class LoadFailure(OrderClientError):
    """Menu fetch or seed did not complete with a usable response."""


class ValidationFailure(OrderClientError):
    """Checkout preconditions are not met; nothing was sent."""


class OrderRejected(OrderClientError):
    """The backend answered the order request with a non-success status."""

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"order rejected status={status_code} detail={detail!r}")

    @property
    def reason(self) -> str:
        """Server detail when present, otherwise the raw status code."""
        if self.detail:
            return str(self.detail)
        return str(self.status_code)


class TransportFailure(OrderClientError):
    """The order request never completed (connection, timeout, ...)."""
