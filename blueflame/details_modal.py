"""Delivery details entry modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from blueflame.customer import CUSTOMER_FIELDS
from blueflame.models import CustomerDetails

_FIELD_LABELS = {"name": "Name", "email": "Email", "address": "Delivery address"}


class DetailsModal(ModalScreen[dict[str, str] | None]):
    """Edit name, email and address. Dismisses with the edited values or None."""

    CSS = """
    DetailsModal {
        align: center middle;
        background: $background 60%;
    }

    #details-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #details-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #details-body {
        color: white;
        margin-bottom: 1;
    }

    #details-help {
        color: #dddddd;
    }
    """

    def __init__(self, details: CustomerDetails) -> None:
        super().__init__()
        self.values = {field: getattr(details, field) for field in CUSTOMER_FIELDS}
        self.field_index = 0

    @property
    def current_field(self) -> str:
        return CUSTOMER_FIELDS[self.field_index]

    def compose(self) -> ComposeResult:
        with Container(id="details-dialog"):
            yield Static("Your Details", id="details-title")
            yield Static(id="details-body")
            yield Static("Type to edit. Tab/↑/↓ move. Enter save. Esc cancel.", id="details-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self.dismiss(dict(self.values))
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self.field_index = (self.field_index + 1) % len(CUSTOMER_FIELDS)
            self._refresh_content()
            event.stop()
            return

        if event.key in {"shift+tab", "up"}:
            self.field_index = (self.field_index - 1) % len(CUSTOMER_FIELDS)
            self._refresh_content()
            event.stop()
            return

        if event.key == "backspace":
            value = self.values[self.current_field]
            if value:
                self.values[self.current_field] = value[:-1]
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.values[self.current_field] += event.character
            self._refresh_content()
            event.stop()
            return

        # Ignore all non-text keys while typing.
        event.stop()

    def _refresh_content(self) -> None:
        body = self.query_one("#details-body", Static)
        content = Text(style="white")
        for idx, field in enumerate(CUSTOMER_FIELDS):
            if idx > 0:
                content.append("\n")
            active = idx == self.field_index
            pointer = "➤ " if active else "  "
            content.append(f"{pointer}{_FIELD_LABELS[field]}: ", style="bold white" if active else "#9ec5ff")
            content.append(self.values[field])
            if active:
                content.append("|", style="bold white")
        body.update(content)
