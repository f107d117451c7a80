"""Per-form style settings record."""
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from paystyles.styles.constants import PIXEL_KEYS, STYLE_KEYS, ZERO_ALLOWED_KEYS
from paystyles.styles.sanitize import SettingValue, sanitize_setting


def is_present(key: str, value: SettingValue) -> bool:
    """
    True when ``value`` should contribute to a projection.

    None and '' are unset. 0 only counts for keys where zero is meaningful
    (border_radius); a 0px font size is treated as unset.
    """
    if value is None or value == '':
        return False
    if key in PIXEL_KEYS and value == 0:
        return key in ZERO_ALLOWED_KEYS
    return True


@dataclass(frozen=True)
class StyleSettings:
    """
    Immutable style record for one form. ``None`` means unset.

    Field order matches STYLE_KEYS.
    """
    selected_theme: Optional[str] = None
    form_container_background_color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    label_text_color: Optional[str] = None
    input_text_color: Optional[str] = None
    border_color: Optional[str] = None
    primary_color: Optional[str] = None
    button_background_color: Optional[str] = None
    button_text_color: Optional[str] = None
    button_hover_background_color: Optional[str] = None
    border_radius: Optional[int] = None
    label_font_size: Optional[int] = None
    label_font_weight: Optional[str] = None
    input_font_size: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'StyleSettings':
        """Build a record from raw values; unknown keys are ignored."""
        values = {}
        for key, raw in (data or {}).items():
            if key not in STYLE_KEYS or raw is None:
                continue
            value = sanitize_setting(key, raw)
            if value is not None and value != '':
                values[key] = value
        return cls(**values)

    def get(self, key: str, fallback: Any = None) -> Any:
        value = getattr(self, key, None) if key in STYLE_KEYS else None
        return fallback if value is None else value

    def items(self) -> Iterator[Tuple[str, SettingValue]]:
        """Set fields only, in key order."""
        for key in STYLE_KEYS:
            value = getattr(self, key)
            if value is not None:
                yield key, value

    def as_dict(self) -> Dict[str, SettingValue]:
        return dict(self.items())

    def merged(self, other: Optional[Any]) -> 'StyleSettings':
        """Right-biased shallow merge: set fields of ``other`` win."""
        if other is None:
            return self
        if not isinstance(other, StyleSettings):
            other = StyleSettings.from_mapping(other)
        return replace(self, **other.as_dict())

    def is_empty(self) -> bool:
        return not any(True for _ in self.items())

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))
