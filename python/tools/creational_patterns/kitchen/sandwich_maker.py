"""
Sandwich cook.

This module provides the builder that prepares sandwiches.
"""

from loguru import logger

from ..core.enums import FoodKind
from ..core.models import Sandwich
from ..utils.console import announce


class SandwichMaker:
    """Cook that prepares a Sandwich one build step at a time."""

    kind = FoodKind.SANDWICH

    def __init__(self, name: str):
        self.name = name
        self._result = Sandwich()

    def prepare_base(self, base: str) -> None:
        announce(
            f"{self.name} is preparing the sandwich bread! {base} bread will be used."
        )
        self._result.bread = base

    def add_meat(self, meat: str) -> None:
        announce(f"{self.name} is adding filling to the sandwich! {meat} will be used.")
        self._result.filling = meat

    def add_cheese(self, cheese: str) -> None:
        announce(f"{self.name} is adding cheese to the sandwich! {cheese} will be used.")
        self._result.cheese = cheese

    def get_result(self) -> Sandwich:
        announce("Sandwich is ready!", "green")
        return self._result

    def start_new(self) -> None:
        logger.debug(f"{self.name} starts a new sandwich")
        self._result = Sandwich()

    def __repr__(self) -> str:
        return f"SandwichMaker(name={self.name!r})"
