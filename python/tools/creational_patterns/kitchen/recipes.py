"""
Preparing dishes without a kitchen manager.

A cook can be handed straight to client code, which then runs the build steps
itself. The caller owns the cook, so these helpers never reset it.
"""

from ..core.models import Dish, Pizza, Sandwich
from .base import Cook
from .pizza_maker import PizzaMaker
from .sandwich_maker import SandwichMaker


def prepare_dish(cook: Cook, base: str, meat: str, cheese: str) -> Dish:
    """Run the three build steps on `cook` and return its result."""
    cook.prepare_base(base)
    cook.add_meat(meat)
    cook.add_cheese(cheese)
    return cook.get_result()


def create_pizza_without_kitchen_manager(
    pizza_maker: PizzaMaker, flour: str, topping: str, cheese: str
) -> Pizza:
    return prepare_dish(pizza_maker, flour, topping, cheese)


def create_sandwich_without_kitchen_manager(
    sandwich_maker: SandwichMaker, bread: str, filling: str, cheese: str
) -> Sandwich:
    return prepare_dish(sandwich_maker, bread, filling, cheese)
