"""Startup menu load: fetch, seed an empty catalog once, refetch."""

from __future__ import annotations

from blueflame.api import BackendClient
from blueflame.debug_log import log_debug
from blueflame.errors import LoadFailure
from blueflame.menu import MenuStore


class CancelToken:
    """Set once the owning session is torn down. Never reset."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class MenuLoader:
    def __init__(self, client: BackendClient) -> None:
        self.client = client

    async def load(self, store: MenuStore, token: CancelToken) -> bool:
        """Fill ``store`` from the backend.

        Returns True when the store was updated. Failures are logged and leave
        the store as it was; a cancelled token turns every later step into a
        no-op.
        """
        if token.cancelled:
            log_debug("menu_load_dropped reason=cancelled step=start")
            return False
        try:
            items = await self.client.fetch_menu()
            if token.cancelled:
                log_debug("menu_load_dropped reason=cancelled step=fetch")
                return False

            if not items:
                log_debug("menu_load_empty action=seed")
                await self.client.seed_menu()
                if token.cancelled:
                    log_debug("menu_load_dropped reason=cancelled step=seed")
                    return False
                items = await self.client.fetch_menu()
                if token.cancelled:
                    log_debug("menu_load_dropped reason=cancelled step=refetch")
                    return False
        except LoadFailure as exc:
            log_debug(f"menu_load_failed error={exc}")
            return False

        store.replace(items)
        log_debug(f"menu_loaded items={len(items)}")
        return True
