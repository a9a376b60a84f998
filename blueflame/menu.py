"""Menu catalog held for the session, with category filtering."""

from __future__ import annotations

from blueflame.config import ALL_CATEGORIES
from blueflame.models import MenuItem


class MenuStore:
    """Holds the fetched catalog. Items are replaced wholesale, never edited."""

    def __init__(self) -> None:
        self._items: list[MenuItem] = []
        self.is_loaded = False

    @property
    def items(self) -> list[MenuItem]:
        return list(self._items)

    def replace(self, items: list[MenuItem]) -> None:
        self._items = list(items)
        self.is_loaded = True

    def find(self, item_id: str) -> MenuItem | None:
        for item in self._items:
            if item.item_id == item_id:
                return item
        return None

    def categories(self) -> list[str]:
        """Return "All" followed by distinct categories in first-seen order."""
        seen: list[str] = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return [ALL_CATEGORIES, *seen]

    def filtered_view(self, selected: str) -> list[MenuItem]:
        if selected == ALL_CATEGORIES:
            return list(self._items)
        return [item for item in self._items if item.category == selected]
