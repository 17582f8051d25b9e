"""Tests for additive reconciliation."""

import pytest

from configurator.configured import build_dish
from configurator.reconcile import ADD, KEEP, REDUCE, REMOVE, AdditiveStep, plan_additive_step, reconcile_additives


def test_plan_covers_each_case():
    assert plan_additive_step(2, 0) == AdditiveStep(REMOVE, 1)
    assert plan_additive_step(1, 0) == AdditiveStep(REMOVE, 1)
    assert plan_additive_step(1, 4) == AdditiveStep(ADD, 3)
    assert plan_additive_step(5, 2) == AdditiveStep(REDUCE, 3)
    assert plan_additive_step(3, 3) == AdditiveStep(KEEP, 0)


def test_clearing_an_absent_additive_is_a_keep():
    assert plan_additive_step(0, 0) == AdditiveStep(KEEP, 0)

    dish = build_dish("small")
    applied = reconcile_additives(dish, {"майонез": 0})

    assert applied == [("майонез", AdditiveStep(KEEP, 0))]
    assert dish.get_additive_quantity("майонез") == 0
    assert dish.total_price == 60


def test_plan_rejects_negative_target():
    with pytest.raises(ValueError):
        plan_additive_step(1, -1)


@pytest.mark.parametrize("current", [0, 1, 2, 5])
@pytest.mark.parametrize("target", [0, 1, 3, 5])
def test_reconcile_converges_in_one_pass(current, target):
    dish = build_dish("small")
    for _ in range(current):
        dish.add_additive("приправа")

    reconcile_additives(dish, {"приправа": target})

    assert dish.get_additive_quantity("приправа") == target
    if target == 0:
        assert dish.get_ingredient("приправа") is None
    assert dish.total_price == 60 + 15 * target


def test_reconcile_keys_are_independent():
    dish = build_dish("big")
    dish.add_additive("майонез")

    applied = reconcile_additives(dish, {"приправа": 2, "майонез": 0})

    assert dish.get_additive_quantity("приправа") == 2
    assert dish.get_additive_quantity("майонез") == 0
    assert applied == [("приправа", AdditiveStep(ADD, 2)), ("майонез", AdditiveStep(REMOVE, 1))]


def test_seasoning_scenarios():
    dish = build_dish("small", "сыр")
    assert (dish.total_price, dish.total_calories) == (60, 40)

    reconcile_additives(dish, {"приправа": 3})
    assert dish.total_price == 105

    reconcile_additives(dish, {"приправа": 0})
    assert dish.get_ingredient("приправа") is None
    assert dish.total_price == 60
