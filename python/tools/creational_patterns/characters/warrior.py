"""
Warrior character.
"""

from dataclasses import dataclass

from ..core.enums import Role, WarriorType, Weapon
from ..utils.console import announce
from .base import make_identifier


@dataclass(frozen=True)
class Warrior:
    """A melee fighter holding a single weapon."""

    name: str
    level: int
    subtype: WarriorType
    weapon: Weapon

    @property
    def role(self) -> Role:
        return Role.WARRIOR

    @property
    def identifier(self) -> str:
        return make_identifier(self.name, self.level, self.subtype, self.role)

    def use_ability(self) -> str:
        return announce(f"{self.identifier} swings their {self.weapon}", "magenta")
