"""Settings management for fsops.

Settings live in a TOML file (~/.config/fsops/config.toml) with two
sections: ``[io]`` for buffer sizes and line handling, and ``[colors]``
for CLI theming. Every key is optional; missing keys use defaults.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.theme import Theme

from fsops.core.paths import ensure_config_dir, get_config_path

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for settings-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the settings file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the settings file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when settings content is invalid."""


class IOSettings(BaseModel):
    """Buffer and line-handling settings for file operations.

    Attributes:
        copy_buffer_size: Chunk size in bytes for stream copies.
        store_buffer_size: Chunk size in bytes when storing a stream to a file.
        line_separator: Separator used when joining or writing text lines.
    """

    model_config = ConfigDict(extra="forbid")

    copy_buffer_size: int = Field(default=1024, gt=0)
    store_buffer_size: int = Field(default=4 * 1024, gt=0)
    line_separator: str = "\r\n"


class ThemeColors(BaseModel):
    """Color configuration for fsops CLI.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


class Settings(BaseModel):
    """Top-level fsops settings."""

    model_config = ConfigDict(extra="forbid")

    io: IOSettings = Field(default_factory=IOSettings)
    colors: ThemeColors = Field(default_factory=ThemeColors)


def load_config(path: Path | None = None) -> Settings:
    """Load and validate settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        ConfigNotFoundError: If the settings file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Settings file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid settings content: {e}") from e


def save_config(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    Args:
        settings: The Settings object to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data: dict[str, Any] = settings.model_dump(mode="json")

    try:
        if path is None:
            ensure_config_dir()
        else:
            config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)
    except (OSError, RuntimeError) as e:
        raise ConfigError(f"Failed to write settings: {e}") from e

    return config_path


def _load_or_default() -> Settings:
    """Load user settings, falling back to defaults on any problem."""
    try:
        return load_config()
    except ConfigNotFoundError:
        return Settings()
    except ConfigError as e:
        logger.warning("Using default settings: %s", e)
        return Settings()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. If None, uses current settings.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = get_settings().colors

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "header": colors.header,
        "border": colors.border,
        "success": colors.success,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
        "bold_header": f"bold {colors.header}",
        "dim": colors.muted,
    }

    return Theme(styles)


# Module-level cached settings instance
_cached_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings, loading and caching them if necessary.

    Returns:
        Cached Settings instance.
    """
    global _cached_settings
    if _cached_settings is None:
        _cached_settings = _load_or_default()
    return _cached_settings


def reload_settings() -> Settings:
    """Force reload the settings from the configuration file.

    Returns:
        Newly loaded Settings instance.
    """
    global _cached_settings
    _cached_settings = _load_or_default()
    return _cached_settings
