"""
Builder example: cooks that prepare dishes step by step, and a kitchen manager
that directs them.
"""

from .base import Cook
from .pizza_maker import PizzaMaker
from .sandwich_maker import SandwichMaker
from .factory import CookFactory
from .manager import KitchenManager, PLACEHOLDER_COOK_NAME
from .recipes import (
    prepare_dish,
    create_pizza_without_kitchen_manager,
    create_sandwich_without_kitchen_manager,
)

__all__ = [
    'Cook',
    'PizzaMaker',
    'SandwichMaker',
    'CookFactory',
    'KitchenManager',
    'PLACEHOLDER_COOK_NAME',
    'prepare_dish',
    'create_pizza_without_kitchen_manager',
    'create_sandwich_without_kitchen_manager',
]
