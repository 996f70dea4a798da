#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exception hierarchy for the creational patterns examples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger


@dataclass(frozen=True)
class ErrorContext:
    """Context information attached to an error."""

    component: Optional[str] = None
    requested: Optional[str] = None
    additional_info: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for structured logging."""
        return {
            "component": self.component,
            "requested": self.requested,
            "additional_info": self.additional_info,
        }


class CreationalError(Exception):
    """
    Base exception for every failure raised by this package.

    Carries an ErrorContext and the underlying cause, and logs itself with the
    structured context when constructed.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.cause = cause

        # Message text is passed as an argument; it may contain braces.
        logger.bind(
            error_context=self.context.to_dict(),
            original_cause=str(cause) if cause else None,
        ).error("{}: {}", self.__class__.__name__, message)

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.cause:
            base_msg += f"\nCaused by: {self.cause}"
        return base_msg


class KitchenStaffingError(CreationalError):
    """Raised when a kitchen manager is created without any cooks."""

    def __init__(self, manager_name: str, **kwargs: Any) -> None:
        self.manager_name = manager_name
        kwargs.setdefault(
            "context", ErrorContext(component="KitchenManager", requested=manager_name)
        )
        super().__init__("A kitchen manager must have cooks!", **kwargs)


class UnsupportedWeaponError(CreationalError):
    """Raised when no character role can wield the requested weapon."""

    def __init__(self, weapon: str, **kwargs: Any) -> None:
        self.weapon = weapon
        kwargs.setdefault(
            "context", ErrorContext(component="CharacterFactory", requested=weapon)
        )
        super().__init__(
            "This weapon is not available for standard characters!", **kwargs
        )


class ConfigurationError(CreationalError):
    """Raised when a demo configuration cannot be loaded or validated."""

    def __init__(
        self,
        message: str,
        *,
        config_file: Optional[Union[str, Path]] = None,
        **kwargs: Any,
    ) -> None:
        additional_info = kwargs.pop("additional_info", {})
        if config_file:
            additional_info["config_file"] = str(config_file)

        context = kwargs.get("context") or ErrorContext(component="ConfigLoader")
        context.additional_info.update(additional_info)
        kwargs["context"] = context

        self.config_file = Path(config_file) if config_file else None
        super().__init__(message, **kwargs)
