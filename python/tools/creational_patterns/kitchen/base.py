"""
Cook interface.

This module defines the protocol every cook (builder) implements: the build
steps needed to prepare a dish and the calls to retrieve it or start over.
"""

from typing import Protocol

from ..core.enums import FoodKind
from ..core.models import Dish


class Cook(Protocol):
    """Protocol defining the build steps shared by every cook."""

    name: str
    kind: FoodKind

    def prepare_base(self, base: str) -> None:
        """Lay down the base of the dish."""
        ...

    def add_meat(self, meat: str) -> None:
        """Add the topping or filling."""
        ...

    def add_cheese(self, cheese: str) -> None:
        """Add the cheese."""
        ...

    def get_result(self) -> Dish:
        """Return the dish prepared so far."""
        ...

    def start_new(self) -> None:
        """Discard the current dish and start an empty one."""
        ...
