"""
Character factory.

Creates a ready-to-play character from a name and a requested weapon without
exposing which variant is built or how its sub-type is picked.
"""

import random
from typing import FrozenSet, Optional, Union

from loguru import logger

from ..core.enums import MageType, Role, WarriorType, Weapon
from ..core.errors import UnsupportedWeaponError
from .base import Character, CharacterType
from .mage import Mage
from .warrior import Warrior

STARTING_LEVEL = 1


class CharacterFactory:
    """
    Factory for creating standard characters.

    The weapon sets are only used for membership tests. "Hands" belongs to
    both, and the mage set is checked first, so bare hands always make a Mage.
    The requested weapon selects the role only: mages always get a scepter and
    warriors always get a sword.
    """

    MAGE_WEAPONS: FrozenSet[str] = frozenset({Weapon.HANDS.value, Weapon.SCEPTER.value})
    WARRIOR_WEAPONS: FrozenSet[str] = frozenset(
        {
            Weapon.HANDS.value,
            Weapon.AXE.value,
            Weapon.SWORD.value,
            Weapon.HAMMER.value,
        }
    )

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random

    def _get_random_type(self, role: Role) -> CharacterType:
        match role:
            case Role.MAGE:
                return self._rng.choice((MageType.FIRE, MageType.ICE))
            case Role.WARRIOR:
                return self._rng.choice((WarriorType.BARBARIAN, WarriorType.PALADIN))
            case _:
                raise ValueError(f"Unsupported role: {role}")

    def create_new_character(self, name: str, weapon: Union[Weapon, str]) -> Character:
        """
        Create a level 1 character whose role is chosen by the requested weapon.

        Args:
            name: The character's name.
            weapon: The requested weapon name.

        Returns:
            A Mage or a Warrior.

        Raises:
            UnsupportedWeaponError: If neither role can wield the weapon.
        """
        weapon_name = str(weapon)

        if weapon_name in self.MAGE_WEAPONS:
            character = Mage(
                name, STARTING_LEVEL, self._get_random_type(Role.MAGE), True
            )
        elif weapon_name in self.WARRIOR_WEAPONS:
            character = Warrior(
                name, STARTING_LEVEL, self._get_random_type(Role.WARRIOR), Weapon.SWORD
            )
        else:
            raise UnsupportedWeaponError(weapon_name)

        logger.debug(f"Created {character.identifier} for requested weapon {weapon_name}")
        return character
