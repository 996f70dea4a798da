"""
Mage character.
"""

from dataclasses import dataclass

from ..core.enums import MageType, Role
from ..utils.console import announce
from .base import make_identifier


@dataclass(frozen=True)
class Mage:
    """A spell caster, either with a scepter or with bare hands."""

    name: str
    level: int
    subtype: MageType
    uses_scepter: bool

    @property
    def role(self) -> Role:
        return Role.MAGE

    @property
    def identifier(self) -> str:
        return make_identifier(self.name, self.level, self.subtype, self.role)

    def use_ability(self) -> str:
        suffix = "with their scepter!" if self.uses_scepter else "using their magic hands!"

        match self.subtype:
            case MageType.FIRE:
                return announce(f"{self.identifier} casted a Fireball {suffix}", "red")
            case _:
                return announce(f"{self.identifier} casted an Iceball {suffix}", "cyan")
