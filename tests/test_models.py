"""Tests for Ingredient and Dish."""

import random

import pytest

from configurator.models import Dish, Ingredient


def _cheese() -> Ingredient:
    return Ingredient("filling", "сыр", 10, 20)


def _assert_totals(dish: Dish) -> None:
    assert dish.total_price == sum(i.unit_price * i.quantity for i in dish.ingredients.values())
    assert dish.total_calories == sum(i.unit_calories * i.quantity for i in dish.ingredients.values())


def test_ingredient_starts_at_one_and_increments():
    item = _cheese()
    assert item.quantity == 1
    item.increment()
    item.increment()
    assert item.quantity == 3
    assert item.compute_total_price() == 30
    assert item.compute_total_calories() == 60


def test_ingredient_decrement_stops_at_one():
    item = _cheese()
    item.increment()
    item.decrement()
    item.decrement()
    item.decrement()
    assert item.quantity == 1


def test_ingredient_rejects_invalid_construction():
    with pytest.raises(ValueError):
        Ingredient("filling", "сыр", -1, 20)
    with pytest.raises(ValueError):
        Ingredient("filling", "сыр", 10, -5)
    with pytest.raises(ValueError):
        Ingredient("filling", "сыр", 10, 20, quantity=0)


def test_empty_dish_has_zero_totals():
    dish = Dish("Пусто")
    assert dish.total_price == 0
    assert dish.total_calories == 0
    assert dish.render_groups() == []


def test_add_existing_name_increments_and_discards_incoming_values():
    dish = Dish("Тест", [_cheese()])
    dish.add_ingredient(Ingredient("other", "сыр", 999, 999))

    assert list(dish.ingredients) == ["сыр"]
    assert dish.ingredients["сыр"].quantity == 2
    assert dish.ingredients["сыр"].unit_price == 10
    assert dish.total_price == 20
    assert dish.total_calories == 40


def test_initial_duplicates_merge():
    dish = Dish("Тест", [_cheese(), _cheese(), Ingredient("base", "булка", 50, 20)])
    assert dish.ingredients["сыр"].quantity == 2
    assert dish.total_price == 70


def test_remove_and_reduce_absent_are_noops():
    dish = Dish("Тест", [_cheese()])
    dish.remove_ingredient("нет такого")
    dish.reduce_ingredient("нет такого")
    assert dish.ingredients["сыр"].quantity == 1
    assert dish.total_price == 10


def test_reduce_floor_keeps_ingredient():
    dish = Dish("Тест", [_cheese()])
    for _ in range(5):
        dish.reduce_ingredient("сыр")
    assert dish.get_ingredient("сыр") is not None
    assert dish.ingredients["сыр"].quantity == 1
    assert dish.total_price == 10


def test_remove_drops_ingredient_and_totals():
    dish = Dish("Тест", [_cheese(), Ingredient("base", "булка", 50, 20)])
    dish.remove_ingredient("сыр")
    assert dish.get_ingredient("сыр") is None
    assert dish.total_price == 50
    assert dish.total_calories == 20


def test_totals_hold_after_every_random_operation():
    rng = random.Random(7)
    names = ["a", "b", "c", "d"]
    prices = {"a": 1.5, "b": 2, "c": 0, "d": 10}
    dish = Dish("Случайно")

    for _ in range(300):
        name = rng.choice(names)
        op = rng.choice(["add", "remove", "reduce"])
        if op == "add":
            dish.add_ingredient(Ingredient("x", name, prices[name], prices[name] * 3))
        elif op == "remove":
            dish.remove_ingredient(name)
        else:
            dish.reduce_ingredient(name)
        _assert_totals(dish)
        assert len(dish.ingredients) == len(set(dish.ingredients))


def test_sorted_ingredients_is_stable_by_category():
    dish = Dish(
        "Тест",
        [
            Ingredient("filling", "f1", 1, 1),
            Ingredient("base", "b1", 1, 1),
            Ingredient("additive", "a1", 1, 1),
            Ingredient("base", "b2", 1, 1),
            Ingredient("additive", "a2", 1, 1),
        ],
    )
    assert [i.name for i in dish.sorted_ingredients()] == ["a1", "a2", "b1", "b2", "f1"]
    assert list(dish.ingredients) == ["f1", "b1", "a1", "b2", "a2"]


def test_render_groups_without_order_uses_sorted_categories():
    dish = Dish("Тест", [Ingredient("filling", "сыр", 10, 20), Ingredient("base", "булка", 50, 20)])
    groups = dish.render_groups()
    assert [category for category, _ in groups] == ["base", "filling"]
    assert [i.name for i in groups[1][1]] == ["сыр"]


def test_render_groups_with_explicit_order():
    dish = Dish(
        "Тест",
        [
            Ingredient("filling", "сыр", 10, 20),
            Ingredient("base", "булка", 50, 20),
            Ingredient("base", "котлета", 30, 40),
        ],
    )
    groups = dish.render_groups(["filling", "additive", "base"])
    assert [category for category, _ in groups] == ["filling", "additive", "base"]
    assert groups[1][1] == []
    assert [i.name for i in groups[2][1]] == ["булка", "котлета"]


def test_snapshot_lines_carry_line_totals():
    dish = Dish("Тест", [_cheese(), _cheese()])
    snapshot = dish.snapshot()

    assert snapshot.name == "Тест"
    assert snapshot.total_price == 20
    line = snapshot.groups[0].lines[0]
    assert (line.name, line.quantity, line.line_total_price, line.line_total_calories) == ("сыр", 2, 20, 40)
