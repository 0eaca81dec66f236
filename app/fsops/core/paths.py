"""XDG-compliant path management for fsops.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and cache storage.

XDG defaults:
- Config: ~/.config/fsops/
- Cache: ~/.cache/fsops/
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Application identifier for directory naming
APP_NAME = "fsops"


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
        Path to ~/.config/fsops/ (or XDG_CONFIG_HOME/fsops/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_cache_dir() -> Path:
    """Get the cache directory path.

    Returns:
        Path to ~/.cache/fsops/ (or XDG_CACHE_HOME/fsops/).
    """
    return _get_xdg_dir("XDG_CACHE_HOME", ".cache")


def get_config_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/fsops/config.toml.
    """
    return get_config_dir() / "config.toml"


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_config_dir(), "config")


def find_cache_dir() -> Path | None:
    """Look up the cache directory, creating it on first use.

    Unlike the ensure_* helpers this never raises: callers that can
    live without a cache get None back instead.

    Returns:
        Path to the cache directory, or None if it cannot be created.
    """
    try:
        return _ensure_dir(get_cache_dir(), "cache")
    except RuntimeError as e:
        logger.warning("Cache directory unavailable: %s", e)
        return None
