"""Configuration model and I/O.

Configuration is stored in ~/.config/mcf-uninstall/config.toml. Every key
is optional; a missing file means defaults. Command-line options override
file values.

Example::

    [categories]
    scoreboard = true
    storage = ["!temp"]
    tag = false

    [output]
    path = "uninstall.mcfunction"
    kill_tags = false
    suffixes = [".mcfunction"]

    [namespace]
    target = "data"
    depth_limit = 5
    height_limit = 10
"""

import logging
import os
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mcfuninstall.core.paths import DEFAULT_OUTPUT_NAME, get_config_path
from mcfuninstall.filters.expression import FilterCompileError
from mcfuninstall.models.match import Category
from mcfuninstall.models.settings import CategorySetting, ScanConfig
from mcfuninstall.namespace.resolver import (
    DEFAULT_DEPTH_LIMIT,
    DEFAULT_HEIGHT_LIMIT,
    DEFAULT_TARGET,
)

logger = logging.getLogger(__name__)

# Config-file form of a category setting: on/off or a list of filter tokens
CategoryValue = bool | list[str]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


class CategoriesConfig(BaseModel):
    """The ``[categories]`` section."""

    model_config = ConfigDict(extra="forbid")

    scoreboard: CategoryValue = True
    team: CategoryValue = True
    bossbar: CategoryValue = True
    storage: CategoryValue = True
    tag: CategoryValue = True

    def get(self, category: Category) -> CategoryValue:
        value: CategoryValue = getattr(self, category.value)
        return value


class OutputConfig(BaseModel):
    """The ``[output]`` section."""

    model_config = ConfigDict(extra="forbid")

    path: Annotated[str, Field(min_length=1, description="Consolidated output file")] = (
        DEFAULT_OUTPUT_NAME
    )
    kill_tags: Annotated[bool, Field(description="Kill tagged entities instead of untagging")] = (
        False
    )
    suffixes: Annotated[
        list[str],
        Field(description="File suffixes to scan (empty list scans every file)"),
    ] = [".mcfunction"]


class NamespaceConfig(BaseModel):
    """The ``[namespace]`` section."""

    model_config = ConfigDict(extra="forbid")

    target: Annotated[str, Field(min_length=1, description="Datapack data directory name")] = (
        DEFAULT_TARGET
    )
    depth_limit: Annotated[int, Field(ge=0, le=64)] = DEFAULT_DEPTH_LIMIT
    height_limit: Annotated[int, Field(ge=0, le=64)] = DEFAULT_HEIGHT_LIMIT

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Directory names cannot contain separators."""
        if "/" in v or "\\" in v:
            msg = f"target must be a single directory name, got '{v}'"
            raise ValueError(msg)
        return v


class UninstallConfig(BaseModel):
    """Complete configuration file."""

    model_config = ConfigDict(extra="forbid")

    categories: CategoriesConfig = Field(default_factory=CategoriesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    namespace: NamespaceConfig = Field(default_factory=NamespaceConfig)


def load_config(path: Path | None = None, *, required: bool = False) -> UninstallConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.
        required: Raise when the file is missing instead of using defaults.

    Returns:
        Validated UninstallConfig object.

    Raises:
        ConfigError: If the file is required but missing, or its content is invalid.
        ConfigParseError: If the TOML syntax is invalid.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if required:
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return UninstallConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return UninstallConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: UninstallConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file atomically.

    Args:
        config: The configuration to save.
        path: Destination. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_toml(config: UninstallConfig) -> str:
    """Render the configuration as TOML text."""
    data: dict[str, Any] = config.model_dump(mode="json")
    return tomli_w.dumps(data)


def parse_filter_option(value: str) -> tuple[Category, str]:
    """Parse a ``CATEGORY=TOKEN`` command-line filter.

    Raises:
        ConfigError: If the category is unknown or the token is missing.
    """
    name, sep, token = value.partition("=")
    if not sep or not token:
        raise ConfigError(f"Filter must look like CATEGORY=TOKEN, got '{value}'")
    try:
        category = Category(name.strip().lower())
    except ValueError:
        choices = ", ".join(c.value for c in Category)
        raise ConfigError(f"Unknown category '{name}' (choose from {choices})") from None
    return category, token


def build_scan_config(
    config: UninstallConfig,
    skip: Iterable[Category] = (),
    filters: Mapping[Category, list[str]] | None = None,
) -> ScanConfig:
    """Combine file configuration and command-line overrides.

    Command-line filters replace the file's value for their category;
    skipped categories are disabled whatever else is configured.

    Raises:
        ConfigError: If a filter token is malformed or every category is disabled.
    """
    skipped = set(skip)
    filters = filters or {}
    settings: dict[Category, CategorySetting] = {}

    for category in Category:
        try:
            if category in skipped:
                settings[category] = CategorySetting.disabled()
            elif category in filters:
                settings[category] = CategorySetting.filtered(filters[category])
            else:
                settings[category] = CategorySetting.from_value(config.categories.get(category))
        except FilterCompileError as e:
            raise ConfigError(f"Invalid {category.value} filter: {e}") from e

    suffixes = tuple(config.output.suffixes) or None
    try:
        return ScanConfig(categories=settings, suffixes=suffixes)
    except ValueError as e:
        raise ConfigError(str(e)) from e
