"""
Page rendering integration.

The page passes the ids of the forms it rendered straight into these
calls; there is no request-global list of rendered forms.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from flask import current_app
from markupsafe import Markup, escape

from paystyles import db
from paystyles.models import PaymentForm
from paystyles.styles.appearance import appearance_projector
from paystyles.styles.css import DEFAULT_FORM_ID_PREFIX, CssProjector
from paystyles.styles.service import is_on_site
from paystyles.styles.store import settings_store

logger = logging.getLogger(__name__)

DEFAULT_STYLE_TAG_ID = 'paystyles-inline-styles'


def normalize_form_ids(form_ids: Iterable[Any]) -> List[int]:
    """Positive integer ids, duplicates removed, first occurrence order kept."""
    seen = set()
    ids = []
    for raw in form_ids or ():
        try:
            form_id = int(str(raw).strip())
        except (TypeError, ValueError):
            logger.debug(f"Skipping invalid form id {raw!r}")
            continue
        if form_id > 0 and form_id not in seen:
            seen.add(form_id)
            ids.append(form_id)
    return ids


def get_css_projector() -> CssProjector:
    return CssProjector(
        id_prefix=current_app.config.get('FORM_ID_SELECTOR_PREFIX', DEFAULT_FORM_ID_PREFIX)
    )


def on_site_forms(form_ids: Iterable[Any]) -> List[PaymentForm]:
    """Styleable forms among ``form_ids``, in the order given."""
    ids = normalize_form_ids(form_ids)
    if not ids:
        return []
    by_id = {form.id: form for form in PaymentForm.query.filter(PaymentForm.id.in_(ids)).all()}
    return [by_id[form_id] for form_id in ids if is_on_site(by_id.get(form_id))]


def build_elements_config(form_id: Any, config: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Widget config filter for one rendered form.

    Off-site or unknown forms get ``config`` back unchanged (as a dict).
    """
    ids = normalize_form_ids([form_id])
    form = db.session.get(PaymentForm, ids[0]) if ids else None
    if not is_on_site(form):
        return dict(config or {})
    return appearance_projector.apply(config, settings_store.load(form.id))


def build_page_styles(form_ids: Iterable[Any]) -> str:
    """CSS text for every styleable form rendered on a page."""
    forms = on_site_forms(form_ids)
    if not forms:
        return ''
    settings = settings_store.load_many([form.id for form in forms])
    return get_css_projector().project_for_multiple_forms(
        {form.id: settings[form.id] for form in forms}
    )


def render_style_tag(css: str) -> Markup:
    """Wrap page CSS in a <style> element, or return '' when there is none."""
    if not css:
        return Markup('')
    tag_id = current_app.config.get('STYLE_TAG_ID', DEFAULT_STYLE_TAG_ID)
    return Markup(f'\n<style id="{escape(tag_id)}">\n') + Markup(css) + Markup('</style>\n')
