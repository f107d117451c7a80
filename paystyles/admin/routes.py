# paystyles/admin/routes.py
"""
Admin endpoints for payment forms and their style settings.

Responses are JSON; the admin UI renders the picker, color fields and
live preview client-side from these payloads.
"""
from flask import request, jsonify, current_app, abort
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import MultiDict

from paystyles import db
from paystyles.admin import admin_bp
from paystyles.admin.forms import PaymentFormForm, StyleSettingsForm, ApplyThemeForm
from paystyles.api.errors import api_error, register_error_handlers
from paystyles.models import PaymentForm
from paystyles.styles.constants import DEFAULT_THEME_ID, FONT_WEIGHT_LABELS
from paystyles.styles.service import (
    apply_theme, is_on_site, save_style_settings, suggested_defaults
)
from paystyles.styles.store import settings_store
from paystyles.styles.themes import theme_catalog


register_error_handlers(admin_bp)


def _json_formdata():
    """
    Flat JSON body as form data, or None for a form-encoded request.

    Booleans become 'true'/'false' so BooleanField reads them correctly;
    nested values are skipped.
    """
    if not request.is_json:
        return None
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, description='Request body must be a JSON object.')
    data = MultiDict()
    for key, value in payload.items():
        if isinstance(value, (dict, list)):
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        elif value is None:
            value = ''
        data.add(key, value)
    return data


def _bind(form_class):
    formdata = _json_formdata()
    if formdata is None:
        return form_class()
    return form_class(formdata=formdata)


def _get_form_or_404(form_id):
    form = db.session.get(PaymentForm, form_id)
    if form is None:
        abort(404, description='The requested form does not exist.')
    return form


def _form_payload(form):
    return {
        'id': form.id,
        'title': form.title,
        'display_type': form.display_type,
        'on_site': is_on_site(form),
    }


def _styles_payload(form):
    settings = settings_store.load(form.id)
    payload = _form_payload(form)
    payload.update({
        'is_new': not settings_store.has_any(form.id),
        'selected_theme': settings.get('selected_theme', DEFAULT_THEME_ID),
        'settings': settings.as_dict(),
    })
    return payload


@admin_bp.route('/forms', methods=['GET'])
def list_forms():
    forms = PaymentForm.query.order_by(PaymentForm.id).all()
    return jsonify({'forms': [_form_payload(form) for form in forms]})


@admin_bp.route('/forms', methods=['POST'])
def create_form():
    form_input = _bind(PaymentFormForm)
    if not form_input.validate():
        return jsonify({'error': 'invalid_form', 'errors': form_input.errors}), 400

    form = PaymentForm(
        title=str(form_input.title.data).strip(),
        display_type=form_input.display_type.data or 'embedded',
    )
    try:
        db.session.add(form)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating payment form: {e}")
        return api_error('save_failed', 'Could not create the form. Please try again.', 500)

    current_app.logger.info(f"Created payment form {form.id} ({form.display_type})")
    payload = _form_payload(form)
    payload['suggested'] = suggested_defaults(form)
    return jsonify(payload), 201


@admin_bp.route('/forms/<int:form_id>', methods=['DELETE'])
def delete_form(form_id):
    form = _get_form_or_404(form_id)
    try:
        db.session.delete(form)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting payment form {form_id}: {e}")
        return api_error('delete_failed', 'Could not delete the form. Please try again.', 500)

    current_app.logger.info(f"Deleted payment form {form_id} and its styles")
    return jsonify({'deleted': form_id})


@admin_bp.route('/forms/<int:form_id>/styles', methods=['GET'])
def get_styles(form_id):
    form = _get_form_or_404(form_id)
    payload = _styles_payload(form)
    payload.update({
        'suggested': suggested_defaults(form),
        'themes': theme_catalog.as_dict(),
        'font_weights': FONT_WEIGHT_LABELS,
    })
    if not payload['on_site']:
        payload['message'] = 'Styling is only available for embedded and overlay forms.'
    return jsonify(payload)


@admin_bp.route('/forms/<int:form_id>/styles', methods=['POST'])
def save_styles(form_id):
    form = _get_form_or_404(form_id)
    style_form = _bind(StyleSettingsForm)
    reset = bool(style_form.reset.data)

    try:
        result = save_style_settings(form, style_form.submitted_settings(), reset=reset)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error saving styles for form {form_id}: {e}")
        return api_error('save_failed', 'Could not save style settings. Please try again.', 500)

    payload = _styles_payload(form)
    payload.update({'reset': reset, 'saved': result['saved'], 'deleted': result['deleted']})
    return jsonify(payload)


@admin_bp.route('/forms/<int:form_id>/styles/theme', methods=['POST'])
def apply_theme_preset(form_id):
    form = _get_form_or_404(form_id)
    if not is_on_site(form):
        return api_error(
            'form_off_site',
            'Themes can only be applied to embedded and overlay forms.',
            409
        )

    theme_form = _bind(ApplyThemeForm)
    if not theme_form.validate():
        return jsonify({'error': 'invalid_theme', 'errors': theme_form.errors}), 400

    overrides = None
    payload = request.get_json(silent=True) if request.is_json else None
    if isinstance(payload, dict) and isinstance(payload.get('overrides'), dict):
        overrides = payload['overrides']

    try:
        resolved = apply_theme(form, theme_form.theme_id.data, overrides)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error applying theme to form {form_id}: {e}")
        return api_error('save_failed', 'Could not apply the theme. Please try again.', 500)

    response = _styles_payload(form)
    response['applied'] = resolved.as_dict()
    return jsonify(response)
