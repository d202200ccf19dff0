"""XDG-compliant path management for mcf-uninstall.

Only a configuration directory is needed: the tool keeps no state or
cache between runs.

XDG default:
- Config: ~/.config/mcf-uninstall/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "mcf-uninstall"

# Extension every generated function file carries
FUNCTION_SUFFIX = ".mcfunction"

# Default file name for the consolidated uninstall function
DEFAULT_OUTPUT_NAME = f"uninstall{FUNCTION_SUFFIX}"

# Sub-directory created next to scanned functions in adjacent mode
ADJACENT_DIR_NAME = "uninstall"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/mcf-uninstall/ (or XDG_CONFIG_HOME/mcf-uninstall/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/mcf-uninstall/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/mcf-uninstall/theme.toml.
    """
    return get_config_dir() / "theme.toml"
