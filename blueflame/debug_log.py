"""Append-only debug log shared by the loader, checkout and UI."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from blueflame import config


def log_debug(message: str) -> None:
    """Append `<UTC ISO-8601> <message>` to the debug log.

    Messages are an event name followed by key=value pairs, for example
    `menu_load_failed error=...` or `checkout_placed total=25.20`.
    """
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = Path(config.DEBUG_LOG_PATH)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with app flow.
        return
