"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from configurator.config import MAX_ADDITIVE_QUANTITY, resolve_debug_log_path
from configurator.constant import ADDITIVE_CATEGORY, BASE_CATEGORY, FILLING_CATEGORY, PRICE_UNIT, SIZE_LABELS
from configurator.data import ADDITIVES, FILLINGS, AdditiveKey, FillingKey, SizeKey
from configurator.quantity_modal import QuantityModal
from configurator.rendering import badge_style, category_label, format_dish_summary, format_number, format_option_row
from configurator.session import ConfigEvent, OrderSession, SelectFilling, SelectSize, SetAdditiveTarget

OptionRow = tuple[str, str]


class BurgerConfiguratorApp(App):
    """A Textual app for configuring a burger and watching its order summary."""

    TITLE = "Burger Configurator"
    SUB_TITLE = "Основа / Начинка / Добавка"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #summary-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #options-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #options {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        height: 2;
        margin-top: 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    cursor_index = reactive(0)

    BINDINGS = [
        ("j", "move_cursor(1)", "Next option"),
        ("k", "move_cursor(-1)", "Previous option"),
        ("down", "move_cursor(1)", "Next option"),
        ("up", "move_cursor(-1)", "Previous option"),
        ("enter", "apply_selected", "Select"),
        ("right", "adjust_additive(1)", "More"),
        ("plus", "adjust_additive(1)", "More"),
        ("left", "adjust_additive(-1)", "Less"),
        ("minus", "adjust_additive(-1)", "Less"),
        ("x", "clear_additive", "Clear additive"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: OrderSession | None = None) -> None:
        super().__init__()
        self.session = session or OrderSession()
        self.system_status = ""
        self._debug_log_path = Path(resolve_debug_log_path())
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="summary-pane"):
                yield Static("Ваш заказ", classes="pane-title")
                yield Static(id="summary")
            with Vertical(id="options-pane"):
                yield Static("Options", classes="pane-title")
                yield Static(id="options")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._log_debug(f"on_mount size={self.session.size.value!r} filling={self.session.filling.value!r}")
        self._refresh_all()

    def option_rows(self) -> list[OptionRow]:
        rows: list[OptionRow] = []
        rows.extend((BASE_CATEGORY, size.value) for size in self.session.sizes())
        rows.extend((FILLING_CATEGORY, FillingKey(key).value) for key in FILLINGS.keys())
        rows.extend((ADDITIVE_CATEGORY, AdditiveKey(key).value) for key in ADDITIVES.keys())
        return rows

    def selected_row(self) -> OptionRow | None:
        rows = self.option_rows()
        if not (0 <= self.cursor_index < len(rows)):
            return None
        return rows[self.cursor_index]

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, QuantityModal):
            return
        rows = self.option_rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_options()

    def action_apply_selected(self) -> None:
        if isinstance(self.screen, QuantityModal):
            return
        row = self.selected_row()
        if row is None:
            return

        kind, key = row
        if kind == BASE_CATEGORY:
            self._apply_event(SelectSize(size=key, filling=self.session.filling.value))
        elif kind == FILLING_CATEGORY:
            self._apply_event(SelectFilling(filling=key))
        else:
            self._open_quantity_modal(key)

    def action_adjust_additive(self, delta: int) -> None:
        if isinstance(self.screen, QuantityModal):
            return
        row = self.selected_row()
        if row is None or row[0] != ADDITIVE_CATEGORY:
            return

        current = self.session.target_for(row[1])
        target = min(MAX_ADDITIVE_QUANTITY, max(0, current + delta))
        if target == current:
            return
        self._apply_event(SetAdditiveTarget(additive=row[1], quantity=target))

    def action_clear_additive(self) -> None:
        if isinstance(self.screen, QuantityModal):
            return
        row = self.selected_row()
        if row is None or row[0] != ADDITIVE_CATEGORY:
            return
        self._apply_event(SetAdditiveTarget(additive=row[1], quantity=0))

    def _open_quantity_modal(self, additive: str) -> None:
        def on_quantity(quantity: int | None) -> None:
            if quantity is None:
                self._log_debug(f"quantity_cancelled additive={additive!r}")
                return
            self._apply_event(SetAdditiveTarget(additive=additive, quantity=quantity))

        modal = QuantityModal(ADDITIVES.resolve(additive), self.session.target_for(additive))
        self.push_screen(modal, on_quantity)

    def _apply_event(self, event: ConfigEvent) -> None:
        try:
            snapshot = self.session.dispatch(event)
        except ValueError as exc:
            self.system_status = f"Rejected: {exc}"
            self._log_debug(f"dispatch_rejected event={event!r} error={exc!r}")
            self._refresh_all()
            return

        steps = ", ".join(f"{key}:{step.action}x{step.count}" for key, step in self.session.last_steps)
        self.system_status = f"{format_number(snapshot.total_price)} {PRICE_UNIT}"
        self._log_debug(f"dispatch event={event!r} total={snapshot.total_price} steps=[{steps}]")
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_summary()
        self._refresh_options()

    def _refresh_summary(self) -> None:
        try:
            summary_widget = self.query_one("#summary", Static)
        except NoMatches:
            return
        summary_widget.update(format_dish_summary(self.session.snapshot()))

    def _refresh_options(self) -> None:
        try:
            options_widget = self.query_one("#options", Static)
            status_widget = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        lines = Text()
        previous_kind = None
        for idx, (kind, key) in enumerate(self.option_rows()):
            if kind != previous_kind:
                if previous_kind is not None:
                    lines.append("\n")
                lines.append(f"{category_label(kind)}:", style=badge_style(kind))
                previous_kind = kind
            lines.append("\n")
            lines.append_text(self._option_row_text(idx, kind, key))

        options_widget.update(lines)
        status = self.system_status or "Ready"
        status_widget.update(f"J/K move, Enter select, ←/→ additive, X clear. Ctrl+Q quit.\n{status}")

    def _option_row_text(self, idx: int, kind: str, key: str) -> Text:
        pointer = idx == self.cursor_index
        if kind == BASE_CATEGORY:
            return format_option_row(SIZE_LABELS.get(key, key), self.session.size == SizeKey(key), pointer)
        if kind == FILLING_CATEGORY:
            template = FILLINGS.resolve(key)
            label = f"{template.name} ({format_number(template.unit_price)} {PRICE_UNIT})"
            return format_option_row(label, self.session.filling == FillingKey(key), pointer)
        template = ADDITIVES.resolve(key)
        label = f"{template.name} ({format_number(template.unit_price)} {PRICE_UNIT})"
        return format_option_row(label, False, pointer, quantity=self.session.target_for(key))
