"""Dish configured from a dish kind: base, one filling and optional additives."""

from __future__ import annotations

from configurator.constant import ADDITIVE_CATEGORY, FILLING_CATEGORY
from configurator.data import DishKind, kind_for_size
from configurator.models import Dish, Ingredient


class ConfiguredDish(Dish):
    """A dish pre-populated from a ``DishKind``.

    Exactly one ``filling`` ingredient exists at all times. Option keys that
    are not in a catalog resolve to that catalog's default entry.
    """

    def __init__(self, kind: DishKind, filling: str | None = None) -> None:
        super().__init__(kind.dish_name)
        self.kind = kind
        self.add_ingredient(kind.fillings.resolve(filling).build())
        self.add_ingredient(kind.base.build())

    @property
    def current_filling(self) -> Ingredient | None:
        fillings = self.ingredients_of(FILLING_CATEGORY)
        if not fillings:
            return None
        return fillings[0]

    def set_filling(self, filling: str | None) -> None:
        """Replace every filling with the resolved one, leaving exactly one."""
        for item in self.ingredients_of(FILLING_CATEGORY):
            self.remove_ingredient(item.name)
        self.add_ingredient(self.kind.fillings.resolve(filling).build())

    def add_additive(self, additive: str | None) -> None:
        self.add_ingredient(self.kind.additives.resolve(additive).build())

    def remove_additive(self, additive: str | None) -> None:
        item = self._additive(additive)
        if item is not None:
            self.remove_ingredient(item.name)

    def reduce_additive_quantity(self, additive: str | None) -> None:
        item = self._additive(additive)
        if item is not None:
            self.reduce_ingredient(item.name)

    def get_additive_quantity(self, additive: str | None) -> int:
        item = self._additive(additive)
        if item is None:
            return 0
        return item.quantity

    def _additive(self, additive: str | None) -> Ingredient | None:
        name = self.kind.additives.resolve(additive).name
        item = self.get_ingredient(name)
        if item is None or item.category != ADDITIVE_CATEGORY:
            return None
        return item


def build_dish(size: str | None, filling: str | None = None) -> ConfiguredDish:
    """Construct a configured dish for a size key."""
    return ConfiguredDish(kind_for_size(size), filling)
