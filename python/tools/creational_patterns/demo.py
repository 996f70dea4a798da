"""
Runnable walkthrough of both examples.

Prepares a pizza and a sandwich by handing cooks straight to the client, then
fulfils orders through a kitchen manager, then creates characters through the
factory and lets each use its ability.
"""

import random
from typing import Dict, List, Optional

from loguru import logger

from .characters import Character, CharacterFactory
from .core.models import DemoConfig, Dish, Order
from .kitchen import (
    Cook,
    CookFactory,
    KitchenManager,
    prepare_dish,
)
from .utils.console import announce, format_dish, set_color_enabled


def describe_order(order: Order) -> str:
    return f"A {order.meat} {order.food}"


def hire_cooks(config: DemoConfig) -> List[Cook]:
    """Create the cooks listed in the kitchen settings, in order."""
    return [CookFactory.create_cook(spec.kind, spec.name) for spec in config.kitchen.cooks]


def run_kitchen_demo(config: Optional[DemoConfig] = None) -> Dict[str, List[Dish]]:
    """
    Run the builder example.

    Returns:
        The dishes prepared, under "direct" and "managed".
    """
    config = config or DemoConfig()
    cooks = hire_cooks(config)

    direct: List[Dish] = []
    for cook, order in zip(cooks, config.direct_orders):
        cook.start_new()
        dish = prepare_dish(cook, order.base, order.meat, order.cheese)
        announce(format_dish(describe_order(order), dish), "blue")
        direct.append(dish)

    managed: List[Dish] = []
    if config.orders:
        manager = KitchenManager(config.kitchen.manager_name, *cooks)
        for order in config.orders:
            dish = manager.fulfill_order(order)
            announce(format_dish(describe_order(order), dish), "blue")
            managed.append(dish)

    return {"direct": direct, "managed": managed}


def run_character_demo(
    config: Optional[DemoConfig] = None, rng: Optional[random.Random] = None
) -> List[Character]:
    """Run the factory example and return the characters created."""
    config = config or DemoConfig()
    factory = CharacterFactory(rng)

    characters: List[Character] = []
    for request in config.characters:
        character = factory.create_new_character(request.name, request.weapon)
        character.use_ability()
        characters.append(character)
    return characters


def run_demo(config: Optional[DemoConfig] = None) -> None:
    """Run both examples with the given (or default) configuration."""
    config = config or DemoConfig()
    set_color_enabled(config.colorize)

    logger.info("Running builder example")
    run_kitchen_demo(config)

    logger.info("Running factory example")
    run_character_demo(config)


def default_kitchen_manager(name: str = "Melissa") -> KitchenManager:
    """A kitchen manager staffed with the default cooks."""
    cooks = hire_cooks(DemoConfig())
    return KitchenManager(name, *cooks)


__all__ = [
    "describe_order",
    "hire_cooks",
    "run_kitchen_demo",
    "run_character_demo",
    "run_demo",
    "default_kitchen_manager",
]
