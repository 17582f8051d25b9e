"""Domain models for the burger configurator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class Ingredient:
    """A priced, calorie-bearing line item tracked by quantity."""

    category: str
    name: str
    unit_price: float
    unit_calories: float
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.unit_price < 0:
            raise ValueError("unit_price must be non-negative")
        if self.unit_calories < 0:
            raise ValueError("unit_calories must be non-negative")
        if self.quantity < 1:
            raise ValueError("quantity must be at least 1")

    def increment(self) -> None:
        self.quantity += 1

    def decrement(self) -> None:
        """Remove one portion; the last portion is never dropped here."""
        if self.quantity > 1:
            self.quantity -= 1

    def compute_total_price(self) -> float:
        return self.unit_price * self.quantity

    def compute_total_calories(self) -> float:
        return self.unit_calories * self.quantity


@dataclass(frozen=True)
class LineSnapshot:
    """Read-only view of one ingredient row."""

    name: str
    quantity: int
    line_total_price: float
    line_total_calories: float


@dataclass(frozen=True)
class GroupSnapshot:
    """Ingredients of one category in display order."""

    category: str
    lines: tuple[LineSnapshot, ...]


@dataclass(frozen=True)
class DishSnapshot:
    """Read-only view of a dish handed to rendering."""

    name: str
    total_price: float
    total_calories: float
    groups: tuple[GroupSnapshot, ...]


class Dish:
    """A named aggregate of ingredients, unique by name.

    Totals are recomputed after every mutation, so ``total_price`` and
    ``total_calories`` always match the contained ingredients.
    """

    def __init__(self, name: str, ingredients: Iterable[Ingredient] = ()) -> None:
        self.name = name
        self.ingredients: dict[str, Ingredient] = {}
        self.total_price: float = 0
        self.total_calories: float = 0
        for ingredient in ingredients:
            self.add_ingredient(ingredient)

    def add_ingredient(self, ingredient: Ingredient) -> None:
        """Insert a new ingredient, or add one portion to the one with the same name."""
        existing = self.ingredients.get(ingredient.name)
        if existing is None:
            self.ingredients[ingredient.name] = ingredient
        else:
            existing.increment()
        self._recompute()

    def remove_ingredient(self, name: str) -> None:
        if name in self.ingredients:
            del self.ingredients[name]
        self._recompute()

    def reduce_ingredient(self, name: str) -> None:
        ingredient = self.ingredients.get(name)
        if ingredient is not None:
            ingredient.decrement()
        self._recompute()

    def compute_price(self) -> float:
        self.total_price = sum((item.compute_total_price() for item in self.ingredients.values()), 0)
        return self.total_price

    def compute_calories(self) -> float:
        self.total_calories = sum((item.compute_total_calories() for item in self.ingredients.values()), 0)
        return self.total_calories

    def get_ingredient(self, name: str) -> Ingredient | None:
        return self.ingredients.get(name)

    def ingredients_of(self, category: str) -> list[Ingredient]:
        return [item for item in self.ingredients.values() if item.category == category]

    def sorted_ingredients(self) -> list[Ingredient]:
        """Ingredients ordered by category; ties keep dish order."""
        return sorted(self.ingredients.values(), key=lambda item: item.category)

    def render_groups(self, category_order: Sequence[str] | None = None) -> list[tuple[str, list[Ingredient]]]:
        """Group ingredients by category for display.

        With an explicit ``category_order`` every listed category yields a
        group, possibly empty. Without one, categories follow their first
        appearance in ``sorted_ingredients()``.
        """
        if category_order is None:
            category_order = []
            for item in self.sorted_ingredients():
                if item.category not in category_order:
                    category_order.append(item.category)

        return [(category, self.ingredients_of(category)) for category in category_order]

    def snapshot(self, category_order: Sequence[str] | None = None) -> DishSnapshot:
        groups = tuple(
            GroupSnapshot(
                category=category,
                lines=tuple(
                    LineSnapshot(
                        name=item.name,
                        quantity=item.quantity,
                        line_total_price=item.compute_total_price(),
                        line_total_calories=item.compute_total_calories(),
                    )
                    for item in items
                ),
            )
            for category, items in self.render_groups(category_order)
        )
        return DishSnapshot(
            name=self.name,
            total_price=self.total_price,
            total_calories=self.total_calories,
            groups=groups,
        )

    def _recompute(self) -> None:
        self.compute_price()
        self.compute_calories()
