#!/usr/bin/env python3
"""
Tests for the cooks (builders) and for preparing dishes without a manager.
"""

import pytest

from creational_patterns.core import FoodKind, Pizza, Sandwich
from creational_patterns.kitchen import (
    CookFactory,
    PizzaMaker,
    SandwichMaker,
    create_pizza_without_kitchen_manager,
    create_sandwich_without_kitchen_manager,
    prepare_dish,
)


def test_new_cook_holds_an_empty_dish(pizza_maker, sandwich_maker):
    assert pizza_maker.get_result() == Pizza()
    assert sandwich_maker.get_result() == Sandwich()


def test_pizza_build_steps_fill_fields_in_order(pizza_maker):
    pizza_maker.prepare_base("wheat")
    pizza_maker.add_meat("pepperoni")
    pizza_maker.add_cheese("brick cheese")

    assert pizza_maker.get_result() == Pizza(
        flour="wheat", topping="pepperoni", cheese="brick cheese"
    )


def test_sandwich_build_steps_fill_fields_in_order(sandwich_maker):
    sandwich_maker.prepare_base("italian")
    sandwich_maker.add_meat("chicken and mayo")
    sandwich_maker.add_cheese("parmesan")

    assert sandwich_maker.get_result() == Sandwich(
        bread="italian", filling="chicken and mayo", cheese="parmesan"
    )


def test_values_are_stored_verbatim(pizza_maker):
    pizza = prepare_dish(pizza_maker, "  ", "", "MOZZARELLA ")
    assert pizza.to_dict() == {"flour": "  ", "topping": "", "cheese": "MOZZARELLA "}


def test_start_new_discards_previous_fields(pizza_maker):
    first = prepare_dish(pizza_maker, "wheat", "pepperoni", "brick cheese")

    pizza_maker.start_new()
    pizza_maker.add_cheese("mozzarella")
    second = pizza_maker.get_result()

    assert second == Pizza(cheese="mozzarella")
    assert second is not first
    assert first == Pizza(flour="wheat", topping="pepperoni", cheese="brick cheese")


def test_build_steps_announce_cook_and_value(capsys, pizza_maker, sandwich_maker):
    pizza_maker.prepare_base("wheat")
    pizza_maker.add_meat("pepperoni")
    pizza_maker.add_cheese("brick cheese")
    pizza_maker.get_result()
    sandwich_maker.prepare_base("italian")
    sandwich_maker.get_result()

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Anna is preparing the pizza base! wheat flour will be used.",
        "Anna is adding the pizza topping! pepperoni will be used.",
        "Anna is adding cheese to the pizza! brick cheese will be used.",
        "Pizza's ready!",
        "Jeremy is preparing the sandwich bread! italian bread will be used.",
        "Sandwich is ready!",
    ]


def test_cooks_are_tagged_with_their_food():
    assert PizzaMaker("Anna").kind is FoodKind.PIZZA
    assert SandwichMaker("Jeremy").kind is FoodKind.SANDWICH


def test_create_without_kitchen_manager(pizza_maker, sandwich_maker):
    pizza = create_pizza_without_kitchen_manager(
        pizza_maker, "wheat", "pepperoni", "brick cheese"
    )
    sandwich = create_sandwich_without_kitchen_manager(
        sandwich_maker, "italian", "chicken and mayo", "parmesan"
    )

    assert pizza == Pizza(flour="wheat", topping="pepperoni", cheese="brick cheese")
    assert sandwich == Sandwich(
        bread="italian", filling="chicken and mayo", cheese="parmesan"
    )


@pytest.mark.parametrize(
    "kind, expected_type",
    [
        (FoodKind.PIZZA, PizzaMaker),
        (FoodKind.SANDWICH, SandwichMaker),
        ("pizza", PizzaMaker),
        ("Sandwich", SandwichMaker),
    ],
)
def test_cook_factory_creates_matching_cook(kind, expected_type):
    cook = CookFactory.create_cook(kind, "George")
    assert isinstance(cook, expected_type)
    assert cook.name == "George"


def test_cook_factory_rejects_unknown_food():
    with pytest.raises(ValueError, match="Unsupported food"):
        CookFactory.create_cook("burger", "George")
