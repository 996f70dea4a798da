#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration loading for the demo, from JSON, YAML or TOML files.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from loguru import logger
from pydantic import ValidationError

from ..core.errors import ConfigurationError, ErrorContext
from ..core.models import DemoConfig


class ConfigLoader:
    """
    Utility class for loading the demo configuration from a file.

    Every format is parsed into a mapping and validated into a DemoConfig. A
    top-level "demo" key or [demo] table is unwrapped when present.
    """

    _SUPPORTED_EXTENSIONS = {
        ".json": "json",
        ".yaml": "yaml",
        ".yml": "yaml",
        ".toml": "toml",
    }

    _DEFAULT_BASE_NAME = "creational"

    @classmethod
    def load_from_file(cls, file_path: Union[Path, str]) -> DemoConfig:
        """
        Load the demo configuration from a file.

        Args:
            file_path: Path to the configuration file.

        Returns:
            DemoConfig: The validated configuration.

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                format, or does not contain a valid configuration.
        """
        config_path = Path(file_path)

        if not config_path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                config_file=config_path,
            )

        suffix = config_path.suffix.lower()
        if suffix not in cls._SUPPORTED_EXTENSIONS:
            supported = ", ".join(cls._SUPPORTED_EXTENSIONS)
            raise ConfigurationError(
                f"Unsupported configuration file format: {suffix}. Supported formats: {supported}",
                config_file=config_path,
            )

        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}",
                config_file=config_path,
                cause=e,
            )

        format_type = cls._SUPPORTED_EXTENSIONS[suffix]
        logger.debug(f"Loading {format_type.upper()} configuration from {config_path}")

        match format_type:
            case "json":
                return cls.load_from_json(content, config_path)
            case "yaml":
                return cls.load_from_yaml(content, config_path)
            case "toml":
                return cls.load_from_toml(content, config_path)
            case _:
                raise ConfigurationError(
                    f"Internal error: unhandled format type {format_type}",
                    config_file=config_path,
                )

    @classmethod
    def load_from_json(
        cls, json_str: str, source_file: Optional[Path] = None
    ) -> DemoConfig:
        """Load the demo configuration from a JSON string."""
        try:
            config_data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON configuration: {e}",
                config_file=source_file,
                cause=e,
                context=ErrorContext(
                    component="ConfigLoader",
                    additional_info={"line": e.lineno, "column": e.colno},
                ),
            )

        return cls._normalize_config(config_data, source_file)

    @classmethod
    def load_from_yaml(
        cls, yaml_str: str, source_file: Optional[Path] = None
    ) -> DemoConfig:
        """Load the demo configuration from a YAML string."""
        try:
            config_data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            error_details = {}
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                error_details.update({"line": mark.line + 1, "column": mark.column + 1})

            raise ConfigurationError(
                f"Invalid YAML configuration: {e}",
                config_file=source_file,
                cause=e,
                context=ErrorContext(
                    component="ConfigLoader", additional_info=error_details
                ),
            )

        if config_data is None:
            config_data = {}
        return cls._normalize_config(config_data, source_file)

    @classmethod
    def load_from_toml(
        cls, toml_str: str, source_file: Optional[Path] = None
    ) -> DemoConfig:
        """Load the demo configuration from a TOML string."""
        try:
            config_data = tomllib.loads(toml_str)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"Invalid TOML configuration: {e}", config_file=source_file, cause=e
            )

        return cls._normalize_config(config_data, source_file)

    @classmethod
    def _normalize_config(
        cls, config_data: Any, source_file: Optional[Path] = None
    ) -> DemoConfig:
        """Unwrap an optional 'demo' section and validate the result."""
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration must be a mapping/dictionary",
                config_file=source_file,
            )

        if isinstance(config_data.get("demo"), dict):
            config_data = config_data["demo"]

        try:
            return DemoConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid demo configuration: {e.error_count()} error(s)\n{e}",
                config_file=source_file,
                cause=e,
            )

    @classmethod
    def get_default_config_files(cls, directory: Path) -> list[Path]:
        """Get configuration files present in `directory`, in order of preference."""
        return [
            directory / f"{cls._DEFAULT_BASE_NAME}{ext}"
            for ext in cls._SUPPORTED_EXTENSIONS
            if (directory / f"{cls._DEFAULT_BASE_NAME}{ext}").is_file()
        ]

    @classmethod
    def auto_discover_config(
        cls, start_directory: Union[Path, str]
    ) -> Optional[DemoConfig]:
        """
        Look for a configuration file in `start_directory` and its parents.

        Returns:
            DemoConfig if a configuration file was found, None otherwise.
        """
        search_dir = Path(start_directory).resolve()

        for directory in [search_dir, *search_dir.parents]:
            config_files = cls.get_default_config_files(directory)
            if config_files:
                logger.info(f"Auto-discovered configuration file: {config_files[0]}")
                return cls.load_from_file(config_files[0])

        logger.debug("No configuration file auto-discovered")
        return None
