"""
Admin-side operations on a form's styles: save a submission, reset, apply
a theme preset.

These stage changes on the db session; the caller commits once.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from flask import current_app

from paystyles.styles.constants import ON_SITE_DISPLAY_TYPES, STYLE_KEYS
from paystyles.styles.settings import StyleSettings
from paystyles.styles.store import settings_store
from paystyles.styles.themes import theme_catalog

logger = logging.getLogger(__name__)


def is_on_site(form) -> bool:
    """Only embedded and overlay forms are styled."""
    if form is None:
        return False
    display_types = current_app.config.get('ON_SITE_DISPLAY_TYPES', ON_SITE_DISPLAY_TYPES)
    return form.display_type in display_types


def save_style_settings(form, submission: Optional[Mapping[str, Any]], reset: bool = False) -> Dict[str, List[str]]:
    """
    Apply an admin submission to ``form``.

    With ``reset`` every style key is deleted and the submission ignored.
    Otherwise, for each style key: an on-site form stores the submitted
    value, and a key that was not submitted (or any key of an off-site form)
    is deleted if it exists. Unknown submitted keys are ignored.
    """
    submission = submission or {}
    saved: List[str] = []
    deleted: List[str] = []

    if reset:
        for key in STYLE_KEYS:
            if settings_store.delete(form.id, key):
                deleted.append(key)
        logger.info(f"Reset styles for form {form.id} ({len(deleted)} keys removed)")
        return {'saved': saved, 'deleted': deleted}

    on_site = is_on_site(form)
    for key in STYLE_KEYS:
        if not on_site and not settings_store.exists(form.id, key):
            continue
        if on_site and key in submission:
            if settings_store.set(form.id, key, submission[key]):
                saved.append(key)
        elif settings_store.delete(form.id, key):
            deleted.append(key)

    ignored = sorted(set(submission) - set(STYLE_KEYS))
    if ignored:
        logger.debug(f"Ignored unknown style keys for form {form.id}: {ignored}")
    logger.info(f"Saved styles for form {form.id}: {len(saved)} set, {len(deleted)} removed")
    return {'saved': saved, 'deleted': deleted}


def apply_theme(form, theme_id: str, overrides: Optional[Mapping[str, Any]] = None) -> StyleSettings:
    """Resolve a preset (plus overrides) and store every field of the result."""
    resolved = theme_catalog.resolve(theme_id, overrides)
    for key, value in resolved.items():
        settings_store.set(form.id, key, value)
    logger.info(f"Applied theme {resolved.selected_theme!r} to form {form.id}")
    return resolved


def suggested_defaults(form) -> Dict[str, Any]:
    """
    Values the admin UI may prefill for a form that has never been styled.

    Nothing is stored. Empty unless NEW_FORM_DEFAULT_BORDER_RADIUS is set.
    """
    radius = current_app.config.get('NEW_FORM_DEFAULT_BORDER_RADIUS')
    if radius is None or settings_store.has_any(form.id):
        return {}
    return {'border_radius': radius}
