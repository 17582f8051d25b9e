"""Configuration events and the session that applies them to a dish."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from configurator.config import DEFAULT_FILLING, DEFAULT_SIZE, MAX_ADDITIVE_QUANTITY, RENDER_CATEGORY_ORDER
from configurator.configured import ConfiguredDish, build_dish
from configurator.data import ADDITIVES, DISH_KINDS, FILLINGS, AdditiveKey, FillingKey, SizeKey, kind_for_size
from configurator.models import DishSnapshot
from configurator.reconcile import AdditiveStep, reconcile_additives


@dataclass(frozen=True)
class SelectSize:
    """Pick a base size; the dish is rebuilt with the given filling."""

    size: str
    filling: str


@dataclass(frozen=True)
class SelectFilling:
    filling: str


@dataclass(frozen=True)
class SetAdditiveTarget:
    additive: str
    quantity: int


ConfigEvent = SelectSize | SelectFilling | SetAdditiveTarget


def normalize_size(size: str | None) -> SizeKey:
    return kind_for_size(size).size


def normalize_filling(filling: str | None) -> FillingKey:
    if filling is not None and filling in FILLINGS:
        return FillingKey(filling)
    return FillingKey(FILLINGS.default_key)


def normalize_additive(additive: str | None) -> AdditiveKey:
    if additive is not None and additive in ADDITIVES:
        return AdditiveKey(additive)
    return AdditiveKey(ADDITIVES.default_key)


class OrderSession:
    """Mirror of the UI selections plus the dish built from them.

    Every event is fully applied, additive reconciliation included, before
    ``dispatch`` returns.
    """

    def __init__(
        self,
        size: str | None = DEFAULT_SIZE,
        filling: str | None = DEFAULT_FILLING,
        additive_targets: Mapping[str, int] | None = None,
    ) -> None:
        self.size = normalize_size(size)
        self.filling = normalize_filling(filling)
        self.additive_targets: dict[AdditiveKey, int] = {AdditiveKey(key): 0 for key in ADDITIVES.keys()}
        for additive, quantity in (additive_targets or {}).items():
            self.additive_targets[normalize_additive(additive)] = _checked_quantity(quantity)
        self.dish: ConfiguredDish = build_dish(self.size, self.filling)
        self.last_steps: list[tuple[str, AdditiveStep]] = self._reconcile()

    def dispatch(self, event: ConfigEvent) -> DishSnapshot:
        if isinstance(event, SelectSize):
            self.size = normalize_size(event.size)
            self.filling = normalize_filling(event.filling)
            self.dish = build_dish(self.size, self.filling)
        elif isinstance(event, SelectFilling):
            self.filling = normalize_filling(event.filling)
            self.dish.set_filling(self.filling)
        elif isinstance(event, SetAdditiveTarget):
            self.additive_targets[normalize_additive(event.additive)] = _checked_quantity(event.quantity)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

        self.last_steps = self._reconcile()
        return self.snapshot()

    def snapshot(self) -> DishSnapshot:
        return self.dish.snapshot(RENDER_CATEGORY_ORDER)

    def target_for(self, additive: str) -> int:
        return self.additive_targets[normalize_additive(additive)]

    @staticmethod
    def sizes() -> list[SizeKey]:
        return list(DISH_KINDS)

    def _reconcile(self) -> list[tuple[str, AdditiveStep]]:
        return reconcile_additives(self.dish, self.additive_targets)


def _checked_quantity(quantity: int) -> int:
    if not (0 <= quantity <= MAX_ADDITIVE_QUANTITY):
        raise ValueError(f"additive quantity must be between 0 and {MAX_ADDITIVE_QUANTITY}")
    return quantity
