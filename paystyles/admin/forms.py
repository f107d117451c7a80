# paystyles/admin/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, BooleanField
from wtforms.validators import DataRequired, Optional, Length, AnyOf

from paystyles.styles.constants import (
    DISPLAY_TYPES, FONT_WEIGHTS, FONT_WEIGHT_LABELS, STYLE_KEYS
)


class PaymentFormForm(FlaskForm):
    # CSRFProtect guards the whole admin blueprint, JSON bodies included
    class Meta:
        csrf = False

    title = StringField('Title', validators=[DataRequired(), Length(max=200)])
    display_type = StringField(
        'Display Type',
        validators=[Optional(), AnyOf(DISPLAY_TYPES)],
        default='embedded'
    )


class StyleSettingsForm(FlaskForm):
    """
    Admin style submission.

    Fields carry no validators: every value is sanitized by the settings
    store, so a bad color or size is dropped rather than reported. Whether
    a field was submitted at all matters, because keys left out of a save
    are deleted.
    """
    class Meta:
        csrf = False

    selected_theme = StringField('Theme')
    form_container_background_color = StringField('Form Container Background')
    background_color = StringField('Input Background')
    text_color = StringField('Text Color')
    label_text_color = StringField('Label Text Color')
    input_text_color = StringField('Input Text Color')
    border_color = StringField('Border Color')
    primary_color = StringField('Primary Color')
    button_background_color = StringField('Button Background')
    button_text_color = StringField('Button Text Color')
    button_hover_background_color = StringField('Button Hover Background')
    border_radius = StringField('Border Radius (px)')
    label_font_size = StringField('Label Font Size (px)')
    label_font_weight = SelectField(
        'Label Font Weight',
        choices=[(weight, FONT_WEIGHT_LABELS[weight]) for weight in FONT_WEIGHTS],
        validate_choice=False
    )
    input_font_size = StringField('Input Font Size (px)')

    reset = BooleanField('Reset all styles')

    def submitted_settings(self):
        """Raw values for the style fields present in the request."""
        return {
            key: getattr(self, key).data
            for key in STYLE_KEYS
            if getattr(getattr(self, key), 'raw_data', None)
        }


class ApplyThemeForm(FlaskForm):
    class Meta:
        csrf = False

    theme_id = StringField('Theme', validators=[DataRequired(), Length(max=64)])
