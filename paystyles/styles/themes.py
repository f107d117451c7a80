"""
Theme presets.

Single source of truth for the named presets offered in the admin theme
picker. A preset is a four-color palette; resolving it produces a complete
StyleSettings record:

    defaults ⊕ palette mapping ⊕ dark-background rule ⊕ per-theme overrides

where ⊕ is a right-biased shallow merge. The override table carries the
values a four-slot palette cannot express (radius, label weight, extra
colors for dark themes).
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from paystyles.styles.constants import DEFAULT_THEME_ID
from paystyles.styles.sanitize import sanitize_theme_id
from paystyles.styles.settings import StyleSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemePalette:
    primary: str
    secondary: str
    text: str
    background: str


@dataclass(frozen=True)
class ThemePreset:
    id: str
    name: str
    palette: ThemePalette
    description: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'colors': {
                'primary': self.palette.primary,
                'secondary': self.palette.secondary,
                'text': self.palette.text,
                'background': self.palette.background,
            },
            'description': self.description,
        }


THEME_PRESETS: Tuple[ThemePreset, ...] = (
    ThemePreset('default', 'Default',
                ThemePalette('#0f8569', '#0e7c62', '#32325d', '#ffffff'),
                "The payment form's default styling"),
    ThemePreset('midnight', 'Midnight',
                ThemePalette('#2c3e50', '#1a252f', '#ffffff', '#34495e'),
                'Dark theme with cool blue tones'),
    ThemePreset('sunset', 'Sunset',
                ThemePalette('#e74c3c', '#c0392b', '#2c3e50', '#ecf0f1'),
                'Warm red accents with light background'),
    ThemePreset('forest', 'Forest',
                ThemePalette('#27ae60', '#219955', '#2c3e50', '#f9f9f9'),
                'Fresh green theme with clean background'),
    ThemePreset('ocean', 'Ocean',
                ThemePalette('#3498db', '#2980b9', '#2c3e50', '#ecf0f1'),
                'Calming blue palette'),
    ThemePreset('lavender', 'Lavender',
                ThemePalette('#9b59b6', '#8e44ad', '#2c3e50', '#f5f5f5'),
                'Elegant purple theme'),
    ThemePreset('monochrome', 'Monochrome',
                ThemePalette('#333333', '#555555', '#333333', '#ffffff'),
                'Simple black and white theme'),
    ThemePreset('sunshine', 'Sunshine',
                ThemePalette('#f1c40f', '#f39c12', '#34495e', '#ffffff'),
                'Bright and cheerful yellow accents'),
    ThemePreset('coral', 'Coral',
                ThemePalette('#e67e22', '#d35400', '#2c3e50', '#f9f9f9'),
                'Warm orange palette'),
    ThemePreset('minimal', 'Minimal',
                ThemePalette('#bdc3c7', '#95a5a6', '#2c3e50', '#ffffff'),
                'Clean, minimalist design'),
)

# Base layer: every field populated before the palette is applied.
THEME_DEFAULTS = StyleSettings(
    selected_theme=DEFAULT_THEME_ID,
    form_container_background_color='#ffffff',
    background_color='#ffffff',
    text_color='#32325d',
    label_text_color='#32325d',
    input_text_color='#32325d',
    border_color='#e6e6e6',
    primary_color='#0f8569',
    button_background_color='#0f8569',
    button_text_color='#ffffff',
    button_hover_background_color='#0e7c62',
    border_radius=4,
    label_font_size=14,
    label_font_weight='normal',
    input_font_size=16,
)

# Backgrounds dark enough that input text must be white unless a theme says
# otherwise.
DARK_BACKGROUNDS = frozenset({'#34495e', '#2c3e50'})
DARK_INPUT_TEXT_COLOR = '#ffffff'

THEME_OVERRIDES: Dict[str, Dict[str, Any]] = {
    'default': {'border_radius': 4, 'label_font_weight': 'normal'},
    'midnight': {
        'border_radius': 0,
        'label_font_weight': 'bold',
        'background_color': '#3d566e',
        'label_text_color': '#ecf0f1',
        'input_text_color': '#ffffff',
        'border_color': '#4a6278',
    },
    'sunset': {'border_radius': 5, 'label_font_weight': '500'},
    'forest': {'border_radius': 3, 'label_font_weight': '500'},
    'ocean': {'border_radius': 5, 'label_font_weight': 'normal'},
    'lavender': {'border_radius': 4, 'label_font_weight': '300'},
    'monochrome': {'border_radius': 0, 'label_font_weight': 'bold', 'border_color': '#333333'},
    'sunshine': {'border_radius': 5, 'label_font_weight': 'bold'},
    'coral': {'border_radius': 3, 'label_font_weight': '500'},
    'minimal': {'border_radius': 2, 'label_font_weight': '300', 'border_color': '#bdc3c7'},
}


def palette_mapping(palette: ThemePalette) -> Dict[str, str]:
    return {
        'primary_color': palette.primary,
        'button_background_color': palette.primary,
        'button_hover_background_color': palette.secondary,
        'text_color': palette.text,
        'label_text_color': palette.text,
        'input_text_color': palette.text,
        'form_container_background_color': palette.background,
        'background_color': palette.background,
    }


class ThemePresetCatalog:
    """Read-only lookup over a fixed tuple of presets."""

    def __init__(self, presets=THEME_PRESETS, overrides=None, defaults=THEME_DEFAULTS):
        self._presets: Dict[str, ThemePreset] = {preset.id: preset for preset in presets}
        self._overrides = THEME_OVERRIDES if overrides is None else overrides
        self._defaults = defaults
        if DEFAULT_THEME_ID not in self._presets:
            raise ValueError(f"Theme catalog needs a '{DEFAULT_THEME_ID}' preset")

    def ids(self) -> List[str]:
        return list(self._presets)

    def presets(self) -> List[ThemePreset]:
        return list(self._presets.values())

    def get(self, theme_id: Optional[str]) -> Optional[ThemePreset]:
        return self._presets.get(sanitize_theme_id(theme_id))

    def __contains__(self, theme_id) -> bool:
        return self.get(theme_id) is not None

    def resolve(self, theme_id: Optional[str],
                override_settings: Optional[Mapping[str, Any]] = None) -> StyleSettings:
        """
        Expand ``theme_id`` into a fully populated StyleSettings record.

        Unknown ids resolve as the default theme. Set fields of
        ``override_settings`` are merged last.
        """
        preset = self.get(theme_id)
        if preset is None:
            logger.info(f"Unknown theme {theme_id!r}, resolving '{DEFAULT_THEME_ID}' instead")
            preset = self._presets[DEFAULT_THEME_ID]

        resolved = self._defaults.merged({'selected_theme': preset.id})
        resolved = resolved.merged(palette_mapping(preset.palette))
        if preset.palette.background.lower() in DARK_BACKGROUNDS:
            resolved = resolved.merged({'input_text_color': DARK_INPUT_TEXT_COLOR})
        resolved = resolved.merged(self._overrides.get(preset.id, {}))
        return resolved.merged(override_settings)

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        """Preset data for the admin theme picker, keyed by id."""
        return {preset.id: preset.as_dict() for preset in self._presets.values()}


theme_catalog = ThemePresetCatalog()
