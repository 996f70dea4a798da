"""
Core module for the creational patterns examples.

This module contains the enums, data models and exceptions shared by the
kitchen and character examples.
"""

from .enums import FoodKind, Role, MageType, WarriorType, Weapon
from .models import (
    Pizza,
    Sandwich,
    Dish,
    Order,
    CookSpec,
    CharacterRequest,
    KitchenSettings,
    DemoConfig,
)
from .errors import (
    ErrorContext,
    CreationalError,
    KitchenStaffingError,
    UnsupportedWeaponError,
    ConfigurationError,
)

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
    "CookSpec",
    "CharacterRequest",
    "KitchenSettings",
    "DemoConfig",
    "ErrorContext",
    "CreationalError",
    "KitchenStaffingError",
    "UnsupportedWeaponError",
    "ConfigurationError",
]
