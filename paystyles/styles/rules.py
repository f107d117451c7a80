"""
Style fan-out table.

One declarative list maps each settings field to everything it styles:
- widget appearance variables (VARIABLES)
- widget-internal selector rules (WIDGET)
- page CSS for the surrounding form markup (CSS), with selectors relative
  to a form scope

Both projectors consume STYLE_RULES in order, so the widget config and the
page CSS cannot drift apart. Order matters: label_text_color and
input_text_color come after text_color so they win on their selectors.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from paystyles.styles.colors import hex_to_rgba

VARIABLES = 'variables'
WIDGET = 'widget'
CSS = 'css'

FOCUS_RING_ALPHA = 0.15

Transform = Callable[[Any], str]


def as_is(value) -> str:
    return str(value)


def px(value) -> str:
    return f'{value}px'


def constant(text: str) -> Transform:
    return lambda _value: text


def tab_underline(width: int) -> Transform:
    return lambda color: f'inset 0 -{width}px {color}'


def focus_ring(color) -> str:
    """Solid 1px ring, translucent 3px halo, faint drop shadow."""
    return (
        f'0 0 0 1px {color}, '
        f'0 0 0 3px {hex_to_rgba(color, FOCUS_RING_ALPHA)}, '
        f'0 1px 2px rgba(0, 0, 0, 0.05)'
    )


@dataclass(frozen=True)
class StyleRule:
    """
    ``declarations`` is a tuple of (property, transform) pairs. For
    VARIABLES rules the property is the variable name and ``selectors`` is
    empty. An ``always`` rule is emitted with ``default`` when the field is
    unset.
    """
    field: str
    system: str
    selectors: Tuple[str, ...]
    declarations: Tuple[Tuple[str, Transform], ...]
    always: bool = False
    default: Optional[Any] = None


# Page markup targets, relative to a form scope. '' is the scope element itself.
FORM_CONTAINER = ('',)

INPUT_TARGETS = (
    '.simpay-form-control input[type="text"]',
    '.simpay-form-control input[type="email"]',
    '.simpay-form-control input[type="tel"]',
    '.simpay-form-control input[type="number"]',
    '.simpay-field-wrap input[type="date"]',
    '.simpay-form-control select',
    '.simpay-field-wrap textarea',
)

INPUT_FOCUS_TARGETS = tuple(f'{target}:focus' for target in INPUT_TARGETS)

CHOICE_TARGETS = (
    '.simpay-form-control input[type="radio"]',
    '.simpay-form-control input[type="checkbox"]',
)

LABEL_TARGETS = (
    '.simpay-label',
    'label',
    '.simpay-radio-label legend',
    '.simpay-total-amount-label',
    '.simpay-address-billing-container-label',
    '.simpay-address-shipping-container-label',
)

# Radio and checkbox option labels; the widget's .CheckboxLabel counterpart
CHOICE_LABEL_TARGETS = (
    '.simpay-radio-wrap label',
    '.simpay-checkbox-wrap label',
)

TEXT_TARGETS = CHOICE_LABEL_TARGETS + (
    '.simpay-total-amount',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
)

# Containers the hosted payment fields are mounted into
HOSTED_FIELD_TARGETS = (
    '.StripeElement',
)

BUTTON_TARGETS = (
    '.simpay-checkout-btn',
    '.simpay-apply-coupon',
)

BUTTON_HOVER_TARGETS = tuple(f'{target}:hover' for target in BUTTON_TARGETS)

CONTAINER_DECLARATIONS = (
    ('background-color', as_is),
    ('padding', constant('30px')),
    ('border-radius', constant('4px')),
    ('max-width', constant('460px')),
    ('margin', constant('0 auto')),
)

STYLE_RULES: Tuple[StyleRule, ...] = (
    # Accent
    StyleRule('primary_color', VARIABLES, (), (('colorPrimary', as_is),)),
    StyleRule('primary_color', WIDGET, ('.Tab:focus', '.Tab:hover', '.Tab--selected:focus'),
              (('boxShadow', tab_underline(4)),)),
    StyleRule('primary_color', WIDGET, ('.Tab--selected',), (('boxShadow', tab_underline(2)),)),
    StyleRule('primary_color', WIDGET,
              ('.Input:focus', '.CodeInput:focus', '.CheckboxInput:focus', '.PickerItem--selected'),
              (('boxShadow', focus_ring),)),
    StyleRule('primary_color', CSS, INPUT_FOCUS_TARGETS,
              (('border-color', as_is), ('box-shadow', focus_ring))),

    # Backgrounds
    StyleRule('form_container_background_color', CSS, FORM_CONTAINER, CONTAINER_DECLARATIONS),
    StyleRule('background_color', VARIABLES, (), (('colorBackground', as_is),)),
    StyleRule('background_color', CSS, INPUT_TARGETS + HOSTED_FIELD_TARGETS,
              (('background-color', as_is),)),

    # Text, then the label/input specific colors that override it
    StyleRule('text_color', VARIABLES, (), (('colorText', as_is),)),
    StyleRule('text_color', WIDGET,
              ('.TabLabel', '.Label', '.CheckboxLabel', '.Input', '.CodeInput', '.PickerItem',
               '.DropdownItem'),
              (('color', as_is),)),
    StyleRule('text_color', WIDGET, ('.TabIcon--selected',), (('fill', as_is),)),
    StyleRule('text_color', CSS, LABEL_TARGETS + INPUT_TARGETS + TEXT_TARGETS, (('color', as_is),)),
    StyleRule('label_text_color', WIDGET, ('.Label', '.CheckboxLabel'), (('color', as_is),)),
    StyleRule('label_text_color', CSS, LABEL_TARGETS + CHOICE_LABEL_TARGETS, (('color', as_is),)),
    StyleRule('input_text_color', WIDGET, ('.Input', '.CodeInput', '.DropdownItem'), (('color', as_is),)),
    StyleRule('input_text_color', CSS, INPUT_TARGETS, (('color', as_is),)),

    # Borders
    StyleRule('border_color', WIDGET, ('.Input', '.CodeInput', '.CheckboxInput', '.PickerItem'),
              (('borderColor', as_is),)),
    StyleRule('border_color', CSS, INPUT_TARGETS + HOSTED_FIELD_TARGETS, (('border-color', as_is),)),
    StyleRule('border_radius', VARIABLES, (), (('borderRadius', px),)),
    StyleRule('border_radius', CSS, INPUT_TARGETS + CHOICE_TARGETS + HOSTED_FIELD_TARGETS,
              (('border-radius', px),)),
    # The host form library hardcodes a button radius, so every form overrides it.
    StyleRule('border_radius', CSS, BUTTON_TARGETS, (('border-radius', px),), always=True, default=0),

    # Typography
    StyleRule('label_font_size', WIDGET, ('.Label', '.TabLabel'), (('fontSize', px),)),
    StyleRule('label_font_size', CSS, LABEL_TARGETS, (('font-size', px),)),
    StyleRule('label_font_weight', WIDGET, ('.Label', '.TabLabel'), (('fontWeight', as_is),)),
    StyleRule('label_font_weight', CSS, LABEL_TARGETS, (('font-weight', as_is),)),
    StyleRule('input_font_size', WIDGET, ('.Input', '.CodeInput', '.PickerItem'), (('fontSize', px),)),
    StyleRule('input_font_size', CSS, INPUT_TARGETS, (('font-size', px),)),

    # Buttons
    StyleRule('button_background_color', CSS, BUTTON_TARGETS,
              (('background-color', as_is), ('border-color', as_is))),
    StyleRule('button_text_color', CSS, BUTTON_TARGETS, (('color', as_is),)),
    StyleRule('button_hover_background_color', CSS, BUTTON_HOVER_TARGETS,
              (('background-color', as_is), ('border-color', as_is))),
)
