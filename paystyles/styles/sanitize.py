"""
Type-directed sanitization for style settings.

Every sanitizer is idempotent: feeding its output back in returns the same
value. Invalid input is never an error here; it degrades to "unset" (or to
the key's safe enum fallback when a value is being stored), so a broken
setting means "use the host default" rather than a rendering failure.
"""
import logging
import math
import re
from typing import Any, Optional, Union

from paystyles.styles.constants import (
    COLOR_KEYS,
    ENUM_FALLBACKS,
    ENUM_KEYS,
    FONT_WEIGHTS,
    PIXEL_KEYS,
    STYLE_KEYS,
    TEXT_KEYS,
)

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r'#(?:[0-9a-fA-F]{3}){1,2}')
RGBA_COLOR_PATTERN = re.compile(
    r'rgba?\(\s*\d{1,3}\s*,\s*\d{1,3}\s*,\s*\d{1,3}\s*(?:,\s*(?:\d+|\d*\.\d+)\s*)?\)'
)
PIXEL_PATTERN = re.compile(r'-?(\d+)(?:\.\d*)?(?:px)?')
THEME_ID_PATTERN = re.compile(r'[^a-z0-9_-]')
THEME_ID_MAX_LENGTH = 64

SettingValue = Union[str, int, None]


def sanitize_color(value: Any) -> str:
    """
    Accept '#rgb', '#rrggbb', 'rgb(r,g,b)' or 'rgba(r,g,b,a)'; anything else
    becomes '' so no free-form CSS ever reaches the projectors.
    """
    if not value or not isinstance(value, str):
        return ''
    value = value.strip()
    if HEX_COLOR_PATTERN.fullmatch(value) or RGBA_COLOR_PATTERN.fullmatch(value):
        return value
    logger.debug(f"Rejected color value {value!r}")
    return ''


def sanitize_pixels(value: Any) -> Optional[int]:
    """
    Coerce a size to a non-negative whole number of pixels.

    Negative numbers keep their magnitude, fractions are truncated and a
    trailing 'px' is tolerated. Non-numeric input returns None (unset);
    0 is returned as 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return abs(int(value))
    if isinstance(value, str):
        match = PIXEL_PATTERN.fullmatch(value.strip())
        if match:
            return int(match.group(1))
    logger.debug(f"Rejected pixel value {value!r}")
    return None


def sanitize_font_weight(value: Any, fallback: str = '') -> str:
    if value is None or isinstance(value, bool):
        return fallback
    weight = str(value).strip().lower()
    if weight in FONT_WEIGHTS:
        return weight
    logger.debug(f"Font weight {value!r} not allowed, using {fallback!r}")
    return fallback


def sanitize_theme_id(value: Any) -> str:
    """Lowercase slug: letters, digits, '-' and '_' only, max 64 chars."""
    if not value or not isinstance(value, str):
        return ''
    return THEME_ID_PATTERN.sub('', value.strip().lower())[:THEME_ID_MAX_LENGTH]


def sanitize_setting(key: str, value: Any, for_storage: bool = False) -> SettingValue:
    """
    Sanitize ``value`` according to the type of ``key``.

    With ``for_storage`` an out-of-enum value falls back to the key's safe
    default (e.g. 'normal' for label_font_weight) instead of ''.
    Unknown keys return None.
    """
    if key in COLOR_KEYS:
        return sanitize_color(value)
    if key in PIXEL_KEYS:
        return sanitize_pixels(value)
    if key in ENUM_KEYS:
        fallback = ENUM_FALLBACKS.get(key, '') if for_storage else ''
        return sanitize_font_weight(value, fallback=fallback)
    if key in TEXT_KEYS:
        return sanitize_theme_id(value)
    logger.debug(f"No sanitizer for unknown style key {key!r}")
    return None


def is_style_key(key: Any) -> bool:
    return isinstance(key, str) and key in STYLE_KEYS
