"""Configuration structures and loading for synthetic-quota."""

import os
import tomllib
from pathlib import Path

import msgspec

from synthetic_quota.errors.types import ConfigError
from synthetic_quota.models import EMPTY_GLYPH
from synthetic_quota.models import FILLED_GLYPH

# Default values
DEFAULT_BAR_WIDTH = 20
DEFAULT_MODEL_LIMIT = 5


# Display configuration
class DisplayConfig(msgspec.Struct, omit_defaults=True, frozen=True):
    """Display settings."""

    bar_width: int = DEFAULT_BAR_WIDTH
    filled_glyph: str = FILLED_GLYPH
    empty_glyph: str = EMPTY_GLYPH
    model_limit: int = DEFAULT_MODEL_LIMIT
    colors: bool = True

    def __post_init__(self) -> None:
        if self.bar_width < 0:
            raise ValueError("bar_width must be non-negative")
        if len(self.filled_glyph) != 1 or len(self.empty_glyph) != 1:
            raise ValueError("glyphs must be single characters")


# Main configuration
class Config(msgspec.Struct, omit_defaults=True, frozen=True):
    """Main configuration structure."""

    display: DisplayConfig = msgspec.field(default_factory=DisplayConfig)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", path=str(path)) from e


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    try:
        return msgspec.convert(data, type=Config)
    except (msgspec.ValidationError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    SYNTHETIC_QUOTA_BAR_WIDTH: Progress bar width in characters
    SYNTHETIC_QUOTA_NO_COLOR: Disable colored output
    """
    display = config.display

    if "SYNTHETIC_QUOTA_BAR_WIDTH" in os.environ:
        raw = os.environ["SYNTHETIC_QUOTA_BAR_WIDTH"]
        try:
            width = int(raw)
        except ValueError as e:
            raise ConfigError(
                f"SYNTHETIC_QUOTA_BAR_WIDTH must be an integer, got {raw!r}"
            ) from e
        if width < 0:
            raise ConfigError("SYNTHETIC_QUOTA_BAR_WIDTH must be non-negative")
        display = msgspec.structs.replace(display, bar_width=width)

    if "SYNTHETIC_QUOTA_NO_COLOR" in os.environ:
        display = msgspec.structs.replace(display, colors=False)

    return msgspec.structs.replace(config, display=display)


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        config = Config()
    else:
        config = convert_config(raw_data)

    return _apply_env_overrides(config)
