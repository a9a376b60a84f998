"""Entry point for the Blue Flame order client."""

from __future__ import annotations

from blueflame.order_app import OrderApp


def main() -> None:
    OrderApp().run()


if __name__ == "__main__":
    main()
