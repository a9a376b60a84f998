"""Runtime configuration defaults for the backend client and the UI."""

from __future__ import annotations

import os
from decimal import Decimal

BACKEND_URL = os.environ.get("BLUEFLAME_BACKEND_URL", "http://localhost:8000").rstrip("/")
HTTP_TIMEOUT_SECONDS = float(os.environ.get("BLUEFLAME_HTTP_TIMEOUT", "10"))

DEBUG_LOG_PATH = os.environ.get("BLUEFLAME_DEBUG_LOG", "/tmp/blueflame-debug.log")

TAX_RATE = Decimal("0.08")
CURRENCY_SYMBOL = "$"

# Sentinel category shown first in the filter bar.
ALL_CATEGORIES = "All"

RESTAURANT_NAME = "Blue Flame Kitchen"
TAGLINE = "Fresh. Fast. Flame-cooked."
