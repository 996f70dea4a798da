"""
Factory example: characters created from a requested weapon.
"""

from .base import Character, CharacterType, make_identifier
from .mage import Mage
from .warrior import Warrior
from .factory import CharacterFactory, STARTING_LEVEL

__all__ = [
    'Character',
    'CharacterType',
    'make_identifier',
    'Mage',
    'Warrior',
    'CharacterFactory',
    'STARTING_LEVEL',
]
