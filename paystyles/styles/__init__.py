"""
Form Styles Module

Turns a form's stored style settings into the two outputs a payment page
needs:
- the appearance config for the hosted payment-fields widget
- CSS for the surrounding form markup
"""
from paystyles.styles.appearance import AppearanceConfigProjector, appearance_projector
from paystyles.styles.colors import hex_to_rgba
from paystyles.styles.css import CssProjector, css_projector
from paystyles.styles.settings import StyleSettings
from paystyles.styles.store import SettingsStore, settings_store
from paystyles.styles.themes import ThemePreset, ThemePresetCatalog, theme_catalog

__all__ = [
    'AppearanceConfigProjector',
    'CssProjector',
    'SettingsStore',
    'StyleSettings',
    'ThemePreset',
    'ThemePresetCatalog',
    'appearance_projector',
    'css_projector',
    'hex_to_rgba',
    'settings_store',
    'theme_catalog',
]
