#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line interface for running the examples.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..characters import CharacterFactory
from ..core.enums import FoodKind
from ..core.errors import CreationalError
from ..core.models import DemoConfig, Order
from ..demo import default_kitchen_manager, describe_order, run_demo
from .config import ConfigLoader
from .console import announce, format_dish, set_color_enabled


def setup_logging(args: argparse.Namespace) -> None:
    """Set up loguru sinks from the command-line options."""
    logger.remove()

    log_level = args.log_level
    if args.verbose and log_level == "INFO":
        log_level = "DEBUG"

    if log_level in ["DEBUG", "TRACE"]:
        log_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    else:
        log_format = (
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        )

    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=not args.no_color,
    )

    if args.log_file:
        logger.add(
            args.log_file,
            level=log_level,
            format=log_format,
            colorize=False,
            rotation="1 MB",
            retention=3,
        )

    logger.debug(f"Logging initialized at {log_level} level")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="creational-patterns",
        description="Builder/director and factory pattern examples.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging output."
    )
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colorized output."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run both examples")
    demo_parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file (.json, .yaml, .yml or .toml)",
    )

    order_parser = subparsers.add_parser(
        "order", help="Fulfil one order through a kitchen manager"
    )
    order_parser.add_argument(
        "food", choices=[kind.value for kind in FoodKind], help="What to prepare"
    )
    order_parser.add_argument("--base", required=True, help="Flour or bread")
    order_parser.add_argument("--meat", required=True, help="Topping or filling")
    order_parser.add_argument("--cheese", required=True, help="Cheese to add")
    order_parser.add_argument(
        "--manager", default="Melissa", help="Kitchen manager name"
    )

    character_parser = subparsers.add_parser(
        "character", help="Create a character and use its ability"
    )
    character_parser.add_argument("name", help="Character name")
    character_parser.add_argument("weapon", help="Requested weapon")

    return parser.parse_args(argv)


def _run_order(args: argparse.Namespace) -> None:
    order = Order(food=args.food, base=args.base, meat=args.meat, cheese=args.cheese)
    dish = default_kitchen_manager(args.manager).fulfill_order(order)
    announce(format_dish(describe_order(order), dish), "blue")


def _run_character(args: argparse.Namespace) -> None:
    character = CharacterFactory().create_new_character(args.name, args.weapon)
    character.use_ability()


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line operation."""
    args = parse_args(argv)
    setup_logging(args)

    if args.no_color:
        set_color_enabled(False)

    try:
        match args.command:
            case "demo":
                if args.config:
                    config = ConfigLoader.load_from_file(args.config)
                else:
                    config = ConfigLoader.auto_discover_config(Path.cwd())
                if config is None:
                    config = DemoConfig()
                if args.no_color:
                    config = config.model_copy(update={"colorize": False})
                run_demo(config)
            case "order":
                _run_order(args)
            case "character":
                _run_character(args)
    except CreationalError as e:
        logger.error("Failed to run {}: {}", args.command, e)
        return 1

    return 0
