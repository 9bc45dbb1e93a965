# src/docfront/config.py
"""Configuration system for docfront.

This module loads generator settings from an INI file, validates them
against a typed schema, and fills in defaults for anything left unset.
"""

import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from docfront.constants import (
    CATEGORY_FILE,
    CONFIG_PATH_ENV,
    DEFAULT_ENCODING,
    LOG_LEVEL_ENV,
    NOT_FOUND_FILE,
    SEARCH_INDEX_FILE,
)
from docfront.diagnostics import PackageWarning


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# Schema: section -> key -> (type, default, min, max, description)
CONFIG_SCHEMA: dict[str, dict[str, tuple[type, Any, Any, Any, str]]] = {
    "output": {
        "search_index_file": (str, SEARCH_INDEX_FILE, None, None, "Search index file name"),
        "category_file": (str, CATEGORY_FILE, None, None, "Category listing file name"),
        "not_found_file": (str, NOT_FOUND_FILE, None, None, "404 page file name"),
        "encoding": (str, DEFAULT_ENCODING, None, None, "Encoding for text output"),
        "indent": (int, 2, 0, 8, "JSON indentation for bulk files"),
    },
    "warnings": {
        "ignore": (str, "", None, None, "Comma-separated warning kinds to ignore"),
    },
    "logging": {
        "level": (str, "INFO", None, None, "Log level for the docfront logger"),
    },
}


@dataclass(frozen=True)
class OutputConfig:
    """Output file configuration."""

    search_index_file: str
    category_file: str
    not_found_file: str
    encoding: str
    indent: int


@dataclass(frozen=True)
class WarningsConfig:
    """Warning reporting configuration."""

    ignore: str

    @property
    def ignored_warnings(self) -> frozenset[PackageWarning]:
        """Warning kinds named in the ignore list."""
        return frozenset(parse_warning_names(self.ignore))


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str


def parse_warning_names(value: str) -> list[PackageWarning]:
    """Parse a comma-separated list of warning names.

    Raises:
        ConfigError: If a name does not match any PackageWarning value.
    """
    warnings = []
    for raw_name in value.split(","):
        name = raw_name.strip()
        if not name:
            continue
        try:
            warnings.append(PackageWarning(name))
        except ValueError as e:
            known = ", ".join(w.value for w in PackageWarning)
            raise ConfigError(f"Unknown warning {name!r} (expected one of: {known})") from e
    return warnings


def _schema_defaults(section: str) -> dict[str, Any]:
    return {key: default for key, (_, default, _, _, _) in CONFIG_SCHEMA[section].items()}


def _load_section(
    parser: ConfigParser, section: str, schema: dict[str, tuple[type, Any, Any, Any, str]]
) -> dict[str, Any]:
    """Load and validate a configuration section.

    Args:
        parser: ConfigParser instance with loaded config
        section: Section name to load
        schema: Schema definition for the section

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If validation fails
    """
    result = {}

    for key, (typ, default, min_val, max_val, _) in schema.items():
        if parser.has_option(section, key):
            raw_value = parser.get(section, key)
            value: int | str
            try:
                value = int(raw_value) if typ is int else raw_value
            except ValueError as e:
                raise ConfigError(
                    f"Invalid value for [{section}].{key}: {raw_value!r} (expected {typ.__name__})"
                ) from e
        else:
            value = default

        if typ is int:
            if min_val is not None and value < min_val:
                raise ConfigError(
                    f"Value for [{section}].{key} is {value}, but minimum is {min_val}"
                )
            if max_val is not None and value > max_val:
                raise ConfigError(
                    f"Value for [{section}].{key} is {value}, but maximum is {max_val}"
                )

        result[key] = value

    return result


def _validate_level(level: str) -> str:
    normalized = level.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise ConfigError(f"Invalid value for [logging].level: {level!r}")
    return normalized


@dataclass(frozen=True)
class Config:
    """Complete generator configuration.

    Every section falls back to its schema defaults, so Config() is a valid
    configuration on its own.
    """

    output: OutputConfig = None  # type: ignore[assignment]
    warnings: WarningsConfig = None  # type: ignore[assignment]
    logging: LoggingConfig = None  # type: ignore[assignment]
    source_path: Optional[Path] = None

    def __post_init__(self):
        """Initialize section configs with defaults if not provided."""
        # Since frozen=True, we need to use object.__setattr__
        if self.output is None:
            object.__setattr__(self, "output", OutputConfig(**_schema_defaults("output")))
        if self.warnings is None:
            object.__setattr__(self, "warnings", WarningsConfig(**_schema_defaults("warnings")))
        if self.logging is None:
            object.__setattr__(self, "logging", LoggingConfig(**_schema_defaults("logging")))


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from an INI file.

    Args:
        config_path: Path to config file. If None or missing, uses schema defaults.

    Returns:
        Config object with all sections populated.

    Raises:
        ConfigError: If validation fails.
    """
    parser = ConfigParser()

    if config_path and config_path.exists():
        parser.read(config_path, encoding="utf-8")

    output = OutputConfig(**_load_section(parser, "output", CONFIG_SCHEMA["output"]))
    warnings = WarningsConfig(**_load_section(parser, "warnings", CONFIG_SCHEMA["warnings"]))
    logging_values = _load_section(parser, "logging", CONFIG_SCHEMA["logging"])
    logging_values["level"] = _validate_level(logging_values["level"])

    # Fail on unknown warning names at load time rather than at first use
    parse_warning_names(warnings.ignore)

    return Config(
        output=output,
        warnings=warnings,
        logging=LoggingConfig(**logging_values),
        source_path=config_path if config_path and config_path.exists() else None,
    )


@lru_cache(maxsize=1)
def load_settings() -> Config:
    """Load settings from environment variables and config file.

    Settings are cached for the lifetime of the process.
    Use load_settings.cache_clear() to reload settings.

    Returns:
        Config populated from the file named by DOCFRONT_CONFIG (if any),
        with DOCFRONT_LOG_LEVEL overriding [logging].level.
    """
    config_path_str = os.getenv(CONFIG_PATH_ENV)
    config = load_config(Path(config_path_str) if config_path_str else None)

    level_override = os.getenv(LOG_LEVEL_ENV)
    if level_override:
        return Config(
            output=config.output,
            warnings=config.warnings,
            logging=LoggingConfig(level=_validate_level(level_override)),
            source_path=config.source_path,
        )
    return config
