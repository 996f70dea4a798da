"""
Console output helpers.

Every progress or result line the examples produce goes through announce(),
which optionally colorizes it with termcolor.
"""

from typing import Optional

from termcolor import colored

_color_enabled = True


def set_color_enabled(enabled: bool) -> None:
    """Turn colorized console output on or off."""
    global _color_enabled
    _color_enabled = enabled


def announce(message: str, color: Optional[str] = None) -> str:
    """Print a line to the console and return the uncolored text."""
    if color and _color_enabled:
        print(colored(message, color))
    else:
        print(message)
    return message


def format_dish(label: str, dish) -> str:
    """Format a finished dish as 'label: field=value, ...'."""
    fields = ", ".join(f"{key}={value!r}" for key, value in dish.to_dict().items())
    return f"{label}: {type(dish).__name__}({fields})"
