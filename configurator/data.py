"""Typed ingredient catalogs and dish kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from configurator.constant import (
    ADDITIVE_CATALOG as _ADDITIVE_CATALOG_RAW,
    ADDITIVE_CATEGORY,
    BASE_CATEGORY,
    DISH_KIND_BY_SIZE as _DISH_KIND_BY_SIZE_RAW,
    FILLING_CATALOG as _FILLING_CATALOG_RAW,
    FILLING_CATEGORY,
)
from configurator.models import Ingredient


class SizeKey(str, Enum):
    BIG = "big"
    SMALL = "small"


class FillingKey(str, Enum):
    CHEESE = "сыр"
    SALAD = "салат"
    POTATO = "картофель"


class AdditiveKey(str, Enum):
    SEASONING = "приправа"
    MAYONNAISE = "майонез"


@dataclass(frozen=True)
class IngredientTemplate:
    """Catalog entry used to mint fresh ingredients."""

    category: str
    name: str
    unit_price: float
    unit_calories: float

    def build(self) -> Ingredient:
        return Ingredient(
            category=self.category,
            name=self.name,
            unit_price=self.unit_price,
            unit_calories=self.unit_calories,
        )


class Catalog:
    """Ordered option-key lookup whose first entry is the default.

    Keys are ``str`` enums, so a raw string equal to a key's value resolves to
    the same entry. Anything unknown resolves to the default.
    """

    def __init__(self, entries: Mapping[str, IngredientTemplate]) -> None:
        if not entries:
            raise ValueError("Catalog needs at least one entry")
        self._entries = dict(entries)
        self.default_key = next(iter(self._entries))

    @property
    def default(self) -> IngredientTemplate:
        return self._entries[self.default_key]

    def resolve(self, key: str | None) -> IngredientTemplate:
        if key is None:
            return self.default
        return self._entries.get(key, self.default)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class DishKind:
    """Descriptor for one size variant: its name, base and option catalogs."""

    size: SizeKey
    dish_name: str
    base: IngredientTemplate
    fillings: Catalog
    additives: Catalog


def _template(category: str, raw: Mapping[str, str | float]) -> IngredientTemplate:
    return IngredientTemplate(
        category=category,
        name=str(raw["name"]),
        unit_price=float(raw["unit_price"]),
        unit_calories=float(raw["unit_calories"]),
    )


FILLINGS = Catalog(
    {FillingKey(key): _template(FILLING_CATEGORY, raw) for key, raw in _FILLING_CATALOG_RAW.items()}
)

ADDITIVES = Catalog(
    {AdditiveKey(key): _template(ADDITIVE_CATEGORY, raw) for key, raw in _ADDITIVE_CATALOG_RAW.items()}
)

DISH_KINDS: dict[SizeKey, DishKind] = {
    SizeKey(size): DishKind(
        size=SizeKey(size),
        dish_name=str(raw["dish_name"]),
        base=IngredientTemplate(
            category=BASE_CATEGORY,
            name=str(raw["base_name"]),
            unit_price=float(raw["unit_price"]),
            unit_calories=float(raw["unit_calories"]),
        ),
        fillings=FILLINGS,
        additives=ADDITIVES,
    )
    for size, raw in _DISH_KIND_BY_SIZE_RAW.items()
}


def kind_for_size(size: str | None) -> DishKind:
    """Get the dish kind for a size key, falling back to the first kind."""
    if size is not None and size in DISH_KINDS:
        return DISH_KINDS[size]
    return next(iter(DISH_KINDS.values()))
