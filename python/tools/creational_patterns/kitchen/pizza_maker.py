"""
Pizza cook.

This module provides the builder that prepares pizzas.
"""

from loguru import logger

from ..core.enums import FoodKind
from ..core.models import Pizza
from ..utils.console import announce


class PizzaMaker:
    """Cook that prepares a Pizza one build step at a time."""

    kind = FoodKind.PIZZA

    def __init__(self, name: str):
        self.name = name
        self._result = Pizza()

    def prepare_base(self, base: str) -> None:
        announce(f"{self.name} is preparing the pizza base! {base} flour will be used.")
        self._result.flour = base

    def add_meat(self, meat: str) -> None:
        announce(f"{self.name} is adding the pizza topping! {meat} will be used.")
        self._result.topping = meat

    def add_cheese(self, cheese: str) -> None:
        announce(f"{self.name} is adding cheese to the pizza! {cheese} will be used.")
        self._result.cheese = cheese

    def get_result(self) -> Pizza:
        announce("Pizza's ready!", "green")
        return self._result

    def start_new(self) -> None:
        logger.debug(f"{self.name} starts a new pizza")
        self._result = Pizza()

    def __repr__(self) -> str:
        return f"PizzaMaker(name={self.name!r})"
