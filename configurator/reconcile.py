"""Converge a dish's additive quantities to target quantities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from configurator.configured import ConfiguredDish

ADD = "add"
REDUCE = "reduce"
REMOVE = "remove"
KEEP = "keep"


@dataclass(frozen=True)
class AdditiveStep:
    """One reconciliation step: ``action`` applied ``count`` times."""

    action: str
    count: int = 0


def plan_additive_step(current: int, target: int) -> AdditiveStep:
    """Plan the step that takes ``current`` to ``target``.

    A target of 0 removes the additive outright (nothing to do when it is
    already absent); otherwise the quantity is walked up or down one portion
    at a time and never removed.
    """
    if target < 0:
        raise ValueError("target quantity must be non-negative")
    if target == 0:
        if current == 0:
            return AdditiveStep(KEEP)
        return AdditiveStep(REMOVE, 1)
    if target > current:
        return AdditiveStep(ADD, target - current)
    if target < current:
        return AdditiveStep(REDUCE, current - target)
    return AdditiveStep(KEEP)


def apply_additive_step(dish: ConfiguredDish, additive: str, step: AdditiveStep) -> None:
    if step.action == REMOVE:
        dish.remove_additive(additive)
    elif step.action == ADD:
        for _ in range(step.count):
            dish.add_additive(additive)
    elif step.action == REDUCE:
        for _ in range(step.count):
            dish.reduce_additive_quantity(additive)


def reconcile_additives(dish: ConfiguredDish, targets: Mapping[str, int]) -> list[tuple[str, AdditiveStep]]:
    """Apply one planned step per additive and return what was applied."""
    applied: list[tuple[str, AdditiveStep]] = []
    for additive, target in targets.items():
        step = plan_additive_step(dish.get_additive_quantity(additive), target)
        apply_additive_step(dish, additive, step)
        applied.append((additive, step))
    return applied
