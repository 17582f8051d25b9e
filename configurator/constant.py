"""Editable static catalog and label configuration."""

from __future__ import annotations

BASE_CATEGORY = "base"
FILLING_CATEGORY = "filling"
ADDITIVE_CATEGORY = "additive"

CATEGORY_LABELS: dict[str, str] = {
    BASE_CATEGORY: "Основа",
    FILLING_CATEGORY: "Начинка",
    ADDITIVE_CATEGORY: "Добавка",
}

# Catalog values consumed by configurator.data (which wraps these into IngredientTemplate instances).
# The first entry of each catalog is its default.
FILLING_CATALOG: dict[str, dict[str, str | float]] = {
    "сыр": {"name": "сыр", "unit_price": 10, "unit_calories": 20},
    "салат": {"name": "салат", "unit_price": 20, "unit_calories": 5},
    "картофель": {"name": "картофель", "unit_price": 15, "unit_calories": 10},
}

ADDITIVE_CATALOG: dict[str, dict[str, str | float]] = {
    "приправа": {"name": "приправа", "unit_price": 15, "unit_calories": 0},
    "майонез": {"name": "майонез", "unit_price": 20, "unit_calories": 5},
}

DISH_KIND_BY_SIZE: dict[str, dict[str, str | float]] = {
    "big": {
        "dish_name": "Большой гамбургер",
        "base_name": "большая булка и котлета",
        "unit_price": 100,
        "unit_calories": 40,
    },
    "small": {
        "dish_name": "Маленький гамбургер",
        "base_name": "маленькая булка и котлета",
        "unit_price": 50,
        "unit_calories": 20,
    },
}

SIZE_LABELS: dict[str, str] = {
    "big": "Большой",
    "small": "Маленький",
}

PRICE_UNIT = "руб."
CALORIES_UNIT = "кал"
QUANTITY_UNIT = "шт."
