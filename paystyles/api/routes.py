"""
Styles API Endpoints

Appearance config, page CSS and theme presets for payment pages.
All endpoints return JSON (except the stylesheet) and use standardized
error responses.
"""
from flask import request, jsonify, current_app, Response

from paystyles import db, csrf
from paystyles.api import api_bp
from paystyles.api.errors import api_error
from paystyles.models import PaymentForm
from paystyles.styles.appearance import appearance_projector
from paystyles.styles.constants import DEFAULT_THEME_ID
from paystyles.styles.render import build_elements_config, build_page_styles, normalize_form_ids
from paystyles.styles.service import is_on_site
from paystyles.styles.settings import StyleSettings
from paystyles.styles.store import settings_store
from paystyles.styles.themes import theme_catalog


@api_bp.route('/forms/<int:form_id>/appearance', methods=['GET'])
def get_appearance(form_id):
    """
    Appearance config for the hosted payment-fields widget of one form.

    Returns:
        200: {"form_id", "on_site", "appearance": {"variables", "rules"}}
        404: Unknown form

    Off-site forms are never styled and get empty variables and rules.
    """
    form = db.session.get(PaymentForm, form_id)
    if form is None:
        return api_error('form_not_found', 'The requested form does not exist.', 404)

    on_site = is_on_site(form)
    settings = settings_store.load(form.id) if on_site else StyleSettings()
    return jsonify({
        'form_id': form.id,
        'on_site': on_site,
        'appearance': appearance_projector.project(settings),
    })


@api_bp.route('/forms/<form_id>/elements-config', methods=['POST'])
@csrf.exempt
def filter_elements_config(form_id):
    """
    Merge a form's appearance into a widget config posted by the page.

    The body is the config the page would otherwise hand to the widget.
    Off-site and unknown forms get it back unchanged.
    """
    config = request.get_json(silent=True)
    if config is None:
        config = {}
    if not isinstance(config, dict):
        return api_error('invalid_config', 'The widget configuration must be a JSON object.', 400)
    return jsonify(build_elements_config(form_id, config))


@api_bp.route('/styles.css', methods=['GET'])
def page_styles():
    """
    CSS for every styleable form rendered on a page.

    Query Parameters:
        form_ids: Comma separated ids, may be repeated (?form_ids=1,2&form_ids=3)

    Example:
        GET /api/styles.css?form_ids=12,14
    """
    raw_ids = []
    for value in request.args.getlist('form_ids'):
        raw_ids.extend(part for part in value.split(',') if part.strip())
    form_ids = normalize_form_ids(raw_ids)

    css = build_page_styles(form_ids)
    current_app.logger.debug(f"Served page CSS for forms {form_ids} ({len(css)} bytes)")
    return Response(css, mimetype='text/css')


@api_bp.route('/themes', methods=['GET'])
def list_themes():
    return jsonify({
        'default': DEFAULT_THEME_ID,
        'themes': theme_catalog.as_dict(),
    })


@api_bp.route('/themes/<theme_id>', methods=['GET'])
def get_theme(theme_id):
    """Preset data plus the full settings record it resolves to."""
    preset = theme_catalog.get(theme_id)
    if preset is None:
        return api_error('theme_not_found', 'No theme preset exists with this id.', 404)
    return jsonify({
        'theme': preset.as_dict(),
        'settings': theme_catalog.resolve(preset.id).as_dict(),
    })
