"""
Shared fixtures for the creational patterns tests.
"""

import random
import sys

import pytest
from loguru import logger

from creational_patterns.kitchen import KitchenManager, PizzaMaker, SandwichMaker
from creational_patterns.utils.console import set_color_enabled


@pytest.fixture(autouse=True)
def plain_console():
    """Print without ANSI colors so captured output can be compared directly."""
    set_color_enabled(False)
    yield
    set_color_enabled(True)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any sinks a CLI test installed."""
    yield
    logger.remove()
    logger.add(sys.__stderr__, level="INFO")


@pytest.fixture
def pizza_maker() -> PizzaMaker:
    return PizzaMaker("Anna")


@pytest.fixture
def sandwich_maker() -> SandwichMaker:
    return SandwichMaker("Jeremy")


@pytest.fixture
def kitchen_manager(pizza_maker, sandwich_maker) -> KitchenManager:
    return KitchenManager("Melissa", pizza_maker, sandwich_maker)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
