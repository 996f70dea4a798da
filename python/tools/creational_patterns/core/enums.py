"""
Enums for the creational patterns examples.

This module contains the tags used to dispatch between the closed sets of
variants: food kinds for the kitchen, roles, sub-types and weapons for the
characters.
"""

from __future__ import annotations

from enum import StrEnum


class FoodKind(StrEnum):
    """Kinds of food a kitchen can prepare; also tags each cook variant."""

    PIZZA = "pizza"
    SANDWICH = "sandwich"

    @classmethod
    def from_string(cls, food: str) -> FoodKind:
        """Convert a food name to its enum value."""
        normalized = food.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported food: {food}")


class Role(StrEnum):
    """Character roles."""

    MAGE = "Mage"
    WARRIOR = "Warrior"


class MageType(StrEnum):
    """Mage sub-types."""

    FIRE = "Fire"
    ICE = "Ice"


class WarriorType(StrEnum):
    """Warrior sub-types."""

    BARBARIAN = "Barbarian"
    PALADIN = "Paladin"


class Weapon(StrEnum):
    """Every weapon name known to the character factory."""

    HANDS = "Hands"
    SCEPTER = "Scepter"
    AXE = "Axe"
    SWORD = "Sword"
    HAMMER = "Hammer"
