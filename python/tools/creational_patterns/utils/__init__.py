"""
Utility modules for the creational patterns examples.

This module provides console output and configuration loading. The
command-line interface lives in utils.cli.
"""

from .console import announce, format_dish, set_color_enabled
from .config import ConfigLoader

__all__ = [
    'announce',
    'format_dish',
    'set_color_enabled',
    'ConfigLoader',
]
