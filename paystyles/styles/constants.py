"""
Form style constants.

Single source of truth for the recognized style keys and their value types,
used by:
- SettingsStore (closed key set, type-directed sanitization)
- Admin save/reset handlers
- The purge-styles CLI command
"""

# Ordered: this is the whole contract surface. Adding a key here is the
# only way to extend the system.
STYLE_KEYS = (
    'selected_theme',
    'form_container_background_color',
    'background_color',
    'text_color',
    'label_text_color',
    'input_text_color',
    'border_color',
    'primary_color',
    'button_background_color',
    'button_text_color',
    'button_hover_background_color',
    'border_radius',
    'label_font_size',
    'label_font_weight',
    'input_font_size',
)

COLOR_KEYS = frozenset({
    'form_container_background_color',
    'background_color',
    'text_color',
    'label_text_color',
    'input_text_color',
    'border_color',
    'primary_color',
    'button_background_color',
    'button_text_color',
    'button_hover_background_color',
})

PIXEL_KEYS = frozenset({
    'border_radius',
    'label_font_size',
    'input_font_size',
})

# Pixel keys where 0 is a meaningful value rather than "no value"
ZERO_ALLOWED_KEYS = frozenset({'border_radius'})

ENUM_KEYS = frozenset({'label_font_weight'})

TEXT_KEYS = frozenset({'selected_theme'})

# '' means "use the host default"
FONT_WEIGHTS = ('', 'normal', 'bold', '100', '200', '300', '400', '500', '600', '700', '800', '900')

FONT_WEIGHT_LABELS = {
    '': 'Theme Default',
    'normal': 'Normal',
    'bold': 'Bold',
    '100': '100 (Thin)',
    '200': '200 (Extra Light)',
    '300': '300 (Light)',
    '400': '400 (Normal)',
    '500': '500 (Medium)',
    '600': '600 (Semi Bold)',
    '700': '700 (Bold)',
    '800': '800 (Extra Bold)',
    '900': '900 (Black)',
}

# Value stored when set() receives something outside the enum
ENUM_FALLBACKS = {
    'label_font_weight': 'normal',
}

DEFAULT_THEME_ID = 'default'

# Forms displayed off-site (redirect to hosted checkout) are never styled
ON_SITE_DISPLAY_TYPES = ('embedded', 'overlay')

# Every display type the host form system knows about
DISPLAY_TYPES = ('embedded', 'overlay', 'stripe_checkout')
