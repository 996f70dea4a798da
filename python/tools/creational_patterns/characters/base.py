"""
Character interface.

Every character variant exposes the same read-only attributes and a single
ability. The identifier is derived from the other attributes.
"""

from typing import Protocol, Union

from ..core.enums import MageType, Role, WarriorType

CharacterType = Union[MageType, WarriorType]


def make_identifier(name: str, level: int, subtype: CharacterType, role: Role) -> str:
    """Build the display identifier, e.g. 'John [Lvl 1 Paladin Warrior]'."""
    return f"{name} [Lvl {level} {subtype} {role}]"


class Character(Protocol):
    """Protocol defining the interface shared by every character."""

    name: str
    level: int

    @property
    def role(self) -> Role: ...

    @property
    def subtype(self) -> CharacterType: ...

    @property
    def identifier(self) -> str: ...

    def use_ability(self) -> str:
        """Print what the character does and return that line."""
        ...
