#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Creational Patterns

Two small, self-contained examples of object-creation design patterns:

- Builder with director: cooks (PizzaMaker, SandwichMaker) prepare dishes one
  build step at a time, and a KitchenManager picks the right cook for an order
  and drives it through the steps.
- Factory: a CharacterFactory turns a requested weapon into a Mage or a
  Warrior with a randomly chosen sub-type.

Both can be run from the command line with `python -m creational_patterns`.
"""

import sys
from loguru import logger

from .core import (
    FoodKind,
    Role,
    MageType,
    WarriorType,
    Weapon,
    Pizza,
    Sandwich,
    Dish,
    Order,
    DemoConfig,
    CreationalError,
    KitchenStaffingError,
    UnsupportedWeaponError,
    ConfigurationError,
)
from .kitchen import (
    Cook,
    PizzaMaker,
    SandwichMaker,
    CookFactory,
    KitchenManager,
    prepare_dish,
    create_pizza_without_kitchen_manager,
    create_sandwich_without_kitchen_manager,
)
from .characters import Character, Mage, Warrior, CharacterFactory
from .utils import ConfigLoader
from .demo import run_demo, run_kitchen_demo, run_character_demo

# Configure loguru with defaults
logger.remove()
logger.add(
    sys.stderr,
    level="INFO",
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True,
)

__version__ = "1.0.0"

__all__ = [
    "FoodKind",
    "Role",
    "MageType",
    "WarriorType",
    "Weapon",
    "Pizza",
    "Sandwich",
    "Dish",
    "Order",
    "DemoConfig",
    "CreationalError",
    "KitchenStaffingError",
    "UnsupportedWeaponError",
    "ConfigurationError",
    "Cook",
    "PizzaMaker",
    "SandwichMaker",
    "CookFactory",
    "KitchenManager",
    "prepare_dish",
    "create_pizza_without_kitchen_manager",
    "create_sandwich_without_kitchen_manager",
    "Character",
    "Mage",
    "Warrior",
    "CharacterFactory",
    "ConfigLoader",
    "run_demo",
    "run_kitchen_demo",
    "run_character_demo",
    "__version__",
]
