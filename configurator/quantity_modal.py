"""Additive quantity entry modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from configurator.config import MAX_ADDITIVE_QUANTITY
from configurator.constant import ADDITIVE_CATEGORY, CALORIES_UNIT, PRICE_UNIT, QUANTITY_UNIT
from configurator.data import IngredientTemplate
from configurator.rendering import badge_style, category_label, format_number


class QuantityModal(ModalScreen[int | None]):
    """Ask for a new target quantity of one additive.

    The entry starts empty and the current target is shown beside it, so the
    first typed digit starts a fresh number. Up/down step from whatever is
    shown. Dismisses with the confirmed quantity, or ``None`` on cancel.
    """

    CSS = """
    QuantityModal {
        align: center middle;
        background: $background 60%;
    }

    #quantity-dialog {
        width: 52;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #quantity-body {
        color: white;
        margin-bottom: 1;
    }

    #quantity-help {
        color: #dddddd;
    }
    """

    _CANCEL_KEYS = {"escape", "q", "ctrl+c"}

    def __init__(self, additive: IngredientTemplate, current: int = 0) -> None:
        super().__init__()
        self.additive = additive
        self.current = current
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="quantity-dialog"):
            yield Static(id="quantity-body")
            yield Static(
                f"0..{MAX_ADDITIVE_QUANTITY}: digits or ↑/↓, Enter confirm, Esc/q cancel",
                id="quantity-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def pending_quantity(self) -> int:
        """Quantity the dialog would confirm right now."""
        if not self.value:
            return self.current
        return int(self.value)

    def on_key(self, event: Key) -> None:
        if event.key in self._CANCEL_KEYS:
            event.stop()
            self.dismiss(None)
            return

        if event.key == "enter":
            event.stop()
            self._confirm()
            return

        if event.key == "backspace":
            self.value = self.value[:-1]
        elif event.key in {"up", "down"}:
            step = 1 if event.key == "up" else -1
            self.value = str(min(MAX_ADDITIVE_QUANTITY, max(0, self.pending_quantity() + step)))
        elif event.is_printable and event.character and event.character.isdigit():
            # One digit past the bound is accepted so the range error can be shown.
            if len(self.value) <= len(str(MAX_ADDITIVE_QUANTITY)):
                self.value = str(int(self.value + event.character))
        else:
            return

        event.stop()
        self.error = ""
        self._refresh_content()

    def _confirm(self) -> None:
        if not self.value:
            self.error = "Type a quantity or press Esc."
            self._refresh_content()
            return

        parsed = int(self.value)
        if parsed > MAX_ADDITIVE_QUANTITY:
            self.error = f"Quantity must be between 0 and {MAX_ADDITIVE_QUANTITY}."
            self._refresh_content()
            return

        self.dismiss(parsed)

    def _refresh_content(self) -> None:
        quantity = self.pending_quantity()
        content = Text()
        content.append(f"{category_label(ADDITIVE_CATEGORY)}:", style=badge_style(ADDITIVE_CATEGORY))
        content.append(f" {self.additive.name}", style="bold")
        content.append(f"\nСейчас: {self.current} {QUANTITY_UNIT}")
        content.append(f"\nБудет:  {self.value or '_'} {QUANTITY_UNIT}")
        if quantity <= MAX_ADDITIVE_QUANTITY:
            content.append(
                f"  {format_number(self.additive.unit_price * quantity)} {PRICE_UNIT}"
                f"  {format_number(self.additive.unit_calories * quantity)} {CALORIES_UNIT}",
                style="dim",
            )
        if self.error:
            content.append(f"\n{self.error}", style="#ffb3b3")
        self.query_one("#quantity-body", Static).update(content)
