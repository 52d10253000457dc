"""
Document settings for notepdf.

Settings are persisted as a flat JSON object. Loading always starts from
``DEFAULT_SETTINGS`` and overlays whatever the file provides, so every field
of `DocumentConfig` has a concrete value. Numeric input is validated here,
at the settings boundary; the layout engine trusts what it receives.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .exceptions import ConfigError
from .utils.files import atomic_write_bytes

logger = logging.getLogger(__name__)


SETTINGS_ENV_VAR = "NOTEPDF_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "watermark_text": "Obsidian",
    "watermark_angle": -45.0,
    "header_text": "",
    "footer_text": "",
    "watermark_font_size": 70.0,
    "body_font_size": 12.0,
}

TEXT_KEYS = ("header_text", "footer_text", "watermark_text")

# Key names used by the note-taking plugin this format started from.
LEGACY_KEYS = {
    "watermarkText": "watermark_text",
    "watermarkAngle": "watermark_angle",
    "headerText": "header_text",
    "footerText": "footer_text",
    "watermarkFontSize": "watermark_font_size",
    "bodyFontSize": "body_font_size",
}

IGNORED_KEYS = frozenset({"mySetting"})


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


def _parse_number(value: Any, what: str) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"{what} must be a number", repr(value))
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{what} must be a number", repr(value)) from exc
    if not math.isfinite(number):
        raise ConfigError(f"{what} must be finite", repr(value))
    return number


def parse_angle(value: Any) -> float:
    """
    Validate a watermark angle coming from user input or a settings file.

    Args:
        value: Number or numeric string, in degrees

    Returns:
        Angle as float

    Raises:
        ConfigError: If the value is not a finite number
    """
    return _parse_number(value, "Watermark angle")


def parse_font_size(value: Any, key: str = "font size") -> float:
    size = _parse_number(value, key.replace("_", " ").capitalize())
    if size <= 0:
        raise ConfigError(f"{key} must be positive", repr(value))
    return size


def coerce_setting(key: str, value: Any) -> Any:
    """Convert a raw value into the type stored for ``key``."""
    if key in TEXT_KEYS:
        return _optional_text(value)
    if key == "watermark_angle":
        return parse_angle(value)
    if key in ("watermark_font_size", "body_font_size"):
        return parse_font_size(value, key)
    raise ConfigError("Unknown setting", key)


def canonical_key(key: str) -> str:
    return LEGACY_KEYS.get(key, key)


def merge_settings(defaults: Mapping[str, Any], persisted: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay ``persisted`` onto ``defaults``; unknown keys are dropped."""
    merged: Dict[str, Any] = dict(defaults)
    for raw_key, value in persisted.items():
        if raw_key in IGNORED_KEYS:
            continue
        key = canonical_key(raw_key)
        if key not in defaults:
            logger.warning(f"Ignoring unknown setting '{raw_key}'")
            continue
        merged[key] = value
    return merged


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """Rendering options for one export; absent texts are ``None``."""

    header_text: Optional[str] = None
    footer_text: Optional[str] = None
    watermark_text: Optional[str] = DEFAULT_SETTINGS["watermark_text"]
    watermark_angle: float = DEFAULT_SETTINGS["watermark_angle"]
    watermark_font_size: float = DEFAULT_SETTINGS["watermark_font_size"]
    body_font_size: float = DEFAULT_SETTINGS["body_font_size"]

    def __post_init__(self):
        for key in TEXT_KEYS:
            object.__setattr__(self, key, _optional_text(getattr(self, key)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DocumentConfig":
        """
        Build a config from persisted settings merged over the defaults.

        Invalid numeric values fall back to their default with a warning so
        that a damaged settings file never blocks an export.
        """
        merged = merge_settings(DEFAULT_SETTINGS, data)
        values: Dict[str, Any] = {}
        for key, value in merged.items():
            try:
                values[key] = coerce_setting(key, value)
            except ConfigError as exc:
                logger.warning(f"Invalid value for '{key}' ({exc}); using default {DEFAULT_SETTINGS[key]!r}")
                values[key] = coerce_setting(key, DEFAULT_SETTINGS[key])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "watermark_text": self.watermark_text or "",
            "watermark_angle": self.watermark_angle,
            "header_text": self.header_text or "",
            "footer_text": self.footer_text or "",
            "watermark_font_size": self.watermark_font_size,
            "body_font_size": self.body_font_size,
        }

    def with_changes(self, **changes: Any) -> "DocumentConfig":
        return replace(self, **changes)


def default_settings_path() -> Path:
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".notepdf" / "settings.json"


class SettingsStore:
    """Loads and saves `DocumentConfig` as JSON."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else default_settings_path()

    def load(self) -> DocumentConfig:
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}, using defaults")
            return DocumentConfig()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {self.path}", str(exc)) from exc

        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Settings file {self.path} is not valid JSON", str(exc)) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {self.path} must contain a JSON object")

        return DocumentConfig.from_mapping(data)

    def save(self, config: DocumentConfig) -> None:
        payload = json.dumps(config.to_dict(), indent=2, ensure_ascii=False) + "\n"
        try:
            atomic_write_bytes(self.path, payload.encode("utf-8"))
        except OSError as exc:
            raise ConfigError(f"Cannot write settings file {self.path}", str(exc)) from exc
        logger.debug(f"Settings saved to {self.path}")

    def update(self, key: str, raw_value: Any) -> DocumentConfig:
        """
        Validate and persist a single setting.

        Args:
            key: Setting name (snake_case or the legacy camelCase name)
            raw_value: Value as typed by the user

        Returns:
            The updated configuration

        Raises:
            ConfigError: For unknown keys or invalid values
        """
        key = canonical_key(key)
        if key not in DEFAULT_SETTINGS:
            raise ConfigError("Unknown setting", key)
        value = coerce_setting(key, raw_value)
        config = self.load().with_changes(**{key: value})
        self.save(config)
        logger.info(f"Setting '{key}' updated")
        return config
