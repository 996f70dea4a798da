"""
Kitchen manager (the director).

The kitchen manager is responsible for producing a dish from a high-level
order. It owns a staff of cooks, picks the one able to prepare the ordered
food, and drives it through the build steps so the client never has to.
"""

from typing import Any, List, Mapping, Optional, Tuple, Union

from loguru import logger

from ..core.enums import FoodKind
from ..core.errors import KitchenStaffingError
from ..core.models import Dish, Order
from ..utils.console import announce
from .base import Cook
from .factory import CookFactory

PLACEHOLDER_COOK_NAME = "George"


class KitchenManager:
    """
    Director that fulfils orders using the cooks it manages.

    Attributes:
        name: The manager's name.
        active_cook: The cook that handled (or will handle) the latest order.
        managed_cooks: Every cook on staff, in hiring order.
    """

    def __init__(self, name: str, *cooks: Cook) -> None:
        if not cooks:
            raise KitchenStaffingError(name)

        self.name = name
        self._managed_cooks: List[Cook] = list(cooks)
        self._active_cook: Cook = self._managed_cooks[0]

        logger.debug(
            f"{name} manages {len(self._managed_cooks)} cook(s), "
            f"active: {self._active_cook.name}"
        )

    @property
    def active_cook(self) -> Cook:
        return self._active_cook

    @property
    def managed_cooks(self) -> Tuple[Cook, ...]:
        return tuple(self._managed_cooks)

    def _find_suitable_cook(self, food: FoodKind) -> None:
        """Make a cook able to prepare `food` the active one, hiring if needed."""
        if self._active_cook.kind is food:
            return

        announce("Changing currently active cook!", "yellow")
        suitable: Optional[Cook] = next(
            (cook for cook in self._managed_cooks if cook.kind is food), None
        )

        if suitable is None:
            suitable = CookFactory.create_cook(food, PLACEHOLDER_COOK_NAME)
            self._managed_cooks.append(suitable)
            logger.info(f"{self.name} hired {suitable.name} to prepare {food}")

        self._active_cook = suitable
        logger.debug(f"Active cook is now {suitable.name} ({food})")

    def fulfill_order(self, order: Union[Order, Mapping[str, Any]]) -> Dish:
        """
        Prepare the dish described by `order` and return it.

        Args:
            order: An Order, or a mapping with food, base, meat and cheese keys.

        Returns:
            The finished Pizza or Sandwich.
        """
        if not isinstance(order, Order):
            order = Order.model_validate(order)

        self._find_suitable_cook(order.food)

        cook = self._active_cook
        cook.start_new()
        cook.prepare_base(order.base)
        cook.add_meat(order.meat)
        cook.add_cheese(order.cheese)

        return cook.get_result()
