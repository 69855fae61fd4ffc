"""Persistent config loader/saver for digirain."""

from __future__ import annotations

import dataclasses
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on Python <3.11
    import tomli as tomllib

from ..constants import (
    AMOUNT_OF_COLUMNS,
    DEFAULT_FRAME_RATE,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    DEFAULT_SYMBOLS,
    DEFAULT_THEME,
    DROPLETS_FADE_PER_FRAME,
    DROPLETS_LENGTH_DEVIATION,
    DROPLETS_MOVE_PERIOD_MS,
    DROPLETS_SPAWN_PERIOD_MS,
    MAXIMUM_AMOUNT_OF_CHARACTERS,
    MONITORING_WINDOW_SIZE_FREQUENCY_HZ,
    ROUGH_LENGTH_OF_A_DROPLET,
)
from ..theme import THEMES
from .glyphs import SYMBOL_SETS

LOGGER = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when configuration values break a rain constraint."""


@dataclass(frozen=True)
class RainConfig:
    """Tunable constants of the rain effect and its display."""

    screen_width: int = DEFAULT_SCREEN_WIDTH
    screen_height: int = DEFAULT_SCREEN_HEIGHT
    columns: int = AMOUNT_OF_COLUMNS
    monitor_hz: float = MONITORING_WINDOW_SIZE_FREQUENCY_HZ
    max_characters: int = MAXIMUM_AMOUNT_OF_CHARACTERS
    spawn_period_ms: int = DROPLETS_SPAWN_PERIOD_MS
    move_period_ms: int = DROPLETS_MOVE_PERIOD_MS
    base_length: int = ROUGH_LENGTH_OF_A_DROPLET
    length_deviation: int = DROPLETS_LENGTH_DEVIATION
    fade_per_frame: float = DROPLETS_FADE_PER_FRAME
    frame_rate: int = DEFAULT_FRAME_RATE
    symbols: str = DEFAULT_SYMBOLS
    theme: str = DEFAULT_THEME
    seed: Optional[int] = None

    @property
    def spawn_period(self) -> float:
        return self.spawn_period_ms / 1000.0

    @property
    def move_period(self) -> float:
        return self.move_period_ms / 1000.0

    @property
    def monitor_period(self) -> float:
        return 1.0 / self.monitor_hz

    @property
    def frame_interval_ms(self) -> int:
        return max(1, int(1000 / self.frame_rate))


_RAIN_KEYS = {
    "screen_width": int,
    "screen_height": int,
    "columns": int,
    "monitor_hz": float,
    "max_characters": int,
    "spawn_period_ms": int,
    "move_period_ms": int,
    "base_length": int,
    "length_deviation": int,
    "fade_per_frame": float,
    "seed": int,
}

_DISPLAY_KEYS = {
    "frame_rate": int,
    "symbols": str,
    "theme": str,
}


def default_config_path() -> Path:
    """Return default config path (~/.config/digirain/config.toml)."""
    return Path.home() / ".config" / "digirain" / "config.toml"


def validate_config(config: RainConfig) -> RainConfig:
    """Return ``config`` unchanged or raise :class:`ConfigError`."""
    for name in ("columns", "max_characters", "spawn_period_ms", "move_period_ms", "base_length", "frame_rate"):
        if getattr(config, name) <= 0:
            raise ConfigError(f"{name} must be positive (got {getattr(config, name)})")
    if config.screen_width <= 0 or config.screen_height <= 0:
        raise ConfigError("screen size must be positive")
    if config.monitor_hz <= 0:
        raise ConfigError(f"monitor_hz must be positive (got {config.monitor_hz})")
    if not 0 < config.fade_per_frame <= 1:
        raise ConfigError(f"fade_per_frame must be in (0, 1] (got {config.fade_per_frame})")
    if config.length_deviation < 0:
        raise ConfigError("length_deviation must not be negative")
    if config.length_deviation * 2 >= config.base_length:
        raise ConfigError(
            f"length_deviation ({config.length_deviation}) must be less than "
            f"half of base_length ({config.base_length})"
        )
    if config.symbols not in SYMBOL_SETS:
        raise ConfigError(f"unknown symbol set {config.symbols!r}")
    if config.theme not in THEMES:
        raise ConfigError(f"unknown theme {config.theme!r}")
    return config


def _coerce(value, kind, key):
    if kind is str:
        if isinstance(value, str) and value.strip():
            return value.strip().lower()
    elif isinstance(value, bool):
        pass
    elif kind is int and isinstance(value, int):
        return value
    elif kind is float and isinstance(value, (int, float)):
        return float(value)
    LOGGER.warning("ignoring invalid config value %s=%r", key, value)
    return None


def _parse_toml(text: str) -> dict:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.warning("malformed config file, using defaults: %s", exc)
        return {}


def _normalize_config(raw: dict) -> RainConfig:
    values = {}
    for section, keys in (("rain", _RAIN_KEYS), ("display", _DISPLAY_KEYS)):
        table = raw.get(section, {})
        if not isinstance(table, dict):
            continue
        for key, kind in keys.items():
            if key not in table:
                continue
            coerced = _coerce(table[key], kind, key)
            if coerced is not None:
                values[key] = coerced
    config = RainConfig(**values)
    try:
        return validate_config(config)
    except ConfigError as exc:
        LOGGER.warning("invalid config, using defaults: %s", exc)
        return RainConfig()


def load_config(path: str | Path | None = None) -> RainConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        LOGGER.debug("no config at %s, using defaults", cfg_path)
        return RainConfig()
    return _normalize_config(_parse_toml(text))


def apply_overrides(config: RainConfig, **overrides) -> RainConfig:
    """Replace non-None fields and validate the result."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return validate_config(dataclasses.replace(config, **changes))


def serialize_config(config: RainConfig) -> str:
    """Serialize RainConfig as TOML text."""
    lines = ["# digirain configuration", "[rain]"]
    for key in _RAIN_KEYS:
        value = getattr(config, key)
        if value is None:
            continue
        lines.append(f"{key} = {value}")
    lines.append("")
    lines.append("[display]")
    lines.append(f"frame_rate = {config.frame_rate}")
    lines.append(f'symbols = "{config.symbols}"')
    lines.append(f'theme = "{config.theme}"')
    return "\n".join(lines) + "\n"


def save_config(config: RainConfig, path: str | Path | None = None) -> Path:
    """Persist config and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(serialize_config(config), encoding="utf-8", newline="\n")
    return cfg_path
