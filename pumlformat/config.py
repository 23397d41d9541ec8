"""Configuration loading and management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import (
    CONFIG_TABLE,
    DEFAULT_INDENT_SIZE,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_LINE_LENGTH,
    DOTFILE_FILENAME,
    PYPROJECT_FILENAME,
)

logger = logging.getLogger(__name__)


@dataclass
class FormatConfig:
    """Configuration for formatting PlantUML files.

    Attributes:
        indent_size: Number of spaces per nesting level.
        max_file_size: Maximum input file size in bytes that will be processed.
        max_line_length: Maximum line length, in characters, that will be classified.

    Examples:
        FormatConfig(indent_size=2)
    """

    indent_size: int = DEFAULT_INDENT_SIZE
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`indent_size` must be a non-negative integer")
    """


def load_config(search_path: Path) -> FormatConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.pumlformat]`` table from `pyproject.toml` and the
    ``[pumlformat]`` or ``[tool.pumlformat]`` table from `.pumlformat.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        FormatConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a matching table is present but not a mapping or
            contains unsupported keys.

    Examples:
        load_config(Path("diagrams"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / PYPROJECT_FILENAME, table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / DOTFILE_FILENAME,
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return FormatConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> FormatConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        logger.warning("Skipping unreadable config file %s: %s", config_file, error)
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        logger.info("Using configuration from %s", config_file)
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> FormatConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return FormatConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return FormatConfig()

    try:
        return FormatConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: FormatConfig) -> None:
    """Validate a `FormatConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If `indent_size` is negative, `max_file_size` or
            `max_line_length` is not positive, or any of them is not an integer.

    Examples:
        validate_config(FormatConfig(indent_size=2))
    """
    _ensure_integers(
        {
            "indent_size": config.indent_size,
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )

    if config.indent_size < 0:
        raise ConfigError("`indent_size` must be a non-negative integer")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")
    if config.max_line_length <= 0:
        raise ConfigError("`max_line_length` must be a positive integer")


def apply_overrides(config: FormatConfig, **overrides: object) -> FormatConfig:
    """Apply override values to a `FormatConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        FormatConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `FormatConfig`.

    Examples:
        updated = apply_overrides(config, indent_size=2)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> FormatConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        FormatConfig: Validated configuration ready for formatting.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), indent_size=2)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
