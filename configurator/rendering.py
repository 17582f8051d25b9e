"""Rendering helpers for dish snapshots and option rows."""

from __future__ import annotations

from rich.text import Text

from configurator.constant import (
    ADDITIVE_CATEGORY,
    BASE_CATEGORY,
    CALORIES_UNIT,
    CATEGORY_LABELS,
    PRICE_UNIT,
    QUANTITY_UNIT,
)
from configurator.models import DishSnapshot


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == BASE_CATEGORY:
        return "bold #ffffff on #b23a48"
    if category == ADDITIVE_CATEGORY:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def format_number(value: float) -> str:
    """Drop a trailing ``.0`` so whole totals print as integers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_dish_summary(snapshot: DishSnapshot) -> Text:
    """Render the order summary: totals first, then non-empty groups."""
    text = Text()
    text.append(snapshot.name, style="bold")
    text.append(f"\n{format_number(snapshot.total_price)} {PRICE_UNIT}")
    text.append(f"  {format_number(snapshot.total_calories)} {CALORIES_UNIT}")

    for group in snapshot.groups:
        if not group.lines:
            continue
        text.append("\n\n")
        text.append(f"{category_label(group.category)}:", style=badge_style(group.category))
        for line in group.lines:
            text.append(f"\n  {line.name}")
            text.append(f"  {line.quantity} {QUANTITY_UNIT}", style="dim")
            text.append(f"  {format_number(line.line_total_price)} {PRICE_UNIT}")
            text.append(f"  {format_number(line.line_total_calories)} {CALORIES_UNIT}", style="dim")
    return text


def format_option_row(label: str, selected: bool, pointer: bool, quantity: int | None = None) -> Text:
    """Render one selectable option; ``quantity`` marks an additive row."""
    text = Text()
    text.append("➤ " if pointer else "  ")
    if quantity is None:
        text.append("(•) " if selected else "( ) ")
        text.append(label, style="bold" if selected else "")
    else:
        text.append(f"[{quantity:>2}] ")
        text.append(label, style="bold" if quantity > 0 else "")
    return text
