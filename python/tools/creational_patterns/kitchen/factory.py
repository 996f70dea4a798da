"""
Cook factory for creating the cook that prepares a given kind of food.
"""

from typing import Union

from loguru import logger

from ..core.enums import FoodKind
from .base import Cook
from .pizza_maker import PizzaMaker
from .sandwich_maker import SandwichMaker


class CookFactory:
    """Factory for creating the appropriate cook instance."""

    @staticmethod
    def create_cook(kind: Union[FoodKind, str], name: str) -> Cook:
        """Create and return a cook that prepares the given kind of food."""
        if not isinstance(kind, FoodKind):
            kind = FoodKind.from_string(kind)

        match kind:
            case FoodKind.PIZZA:
                logger.debug(f"Creating pizza maker {name}")
                return PizzaMaker(name)
            case FoodKind.SANDWICH:
                logger.debug(f"Creating sandwich maker {name}")
                return SandwichMaker(name)
            case _:
                raise ValueError(f"Unsupported food: {kind}")
