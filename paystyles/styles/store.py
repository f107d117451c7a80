"""
Settings store: key-value access to per-form style settings.

Backed by FormStyleSetting rows. The key set is closed (STYLE_KEYS); any
other key is a silent no-op so callers cannot grow arbitrary metadata.
Writes are added to the current db session and never committed here; the
request handler commits once when it is done.
"""
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from paystyles import db
from paystyles.models import FormStyleSetting
from paystyles.styles.constants import STYLE_KEYS
from paystyles.styles.sanitize import is_style_key, sanitize_setting
from paystyles.styles.settings import StyleSettings

logger = logging.getLogger(__name__)


class SettingsStore:

    @staticmethod
    def style_keys() -> Tuple[str, ...]:
        return STYLE_KEYS

    @staticmethod
    def _row(form_id, key: str) -> Optional[FormStyleSetting]:
        return FormStyleSetting.query.filter_by(form_id=form_id, key=key).first()

    def get(self, form_id, key: str, fallback: Any = None) -> Any:
        """
        Return the sanitized stored value for ``key`` or ``fallback`` when the
        key is unknown, absent, or stored empty.

        A stored border_radius of 0 is returned as 0, not as the fallback.
        """
        if not is_style_key(key):
            logger.debug(f"get() ignored unknown style key {key!r}")
            return fallback
        row = self._row(form_id, key)
        if row is None:
            return fallback
        value = sanitize_setting(key, row.value)
        if value is None or value == '':
            return fallback
        return value

    def set(self, form_id, key: str, raw_value: Any) -> bool:
        """Sanitize ``raw_value`` for ``key`` and stage it for saving."""
        if not is_style_key(key):
            logger.debug(f"set() rejected unknown style key {key!r} for form {form_id}")
            return False
        value = sanitize_setting(key, raw_value, for_storage=True)
        stored = '' if value is None else str(value)

        row = self._row(form_id, key)
        if row is None:
            db.session.add(FormStyleSetting(form_id=form_id, key=key, value=stored))
        else:
            row.value = stored
        return True

    def delete(self, form_id, key: str) -> bool:
        if not is_style_key(key):
            return False
        deleted = FormStyleSetting.query.filter_by(form_id=form_id, key=key).delete()
        return bool(deleted)

    def exists(self, form_id, key: str) -> bool:
        """True when a value (even '' or 0) has been stored for ``key``."""
        if not is_style_key(key):
            return False
        return self._row(form_id, key) is not None

    def has_any(self, form_id) -> bool:
        """False for a form that has never had a style saved."""
        return FormStyleSetting.query.filter(
            FormStyleSetting.form_id == form_id,
            FormStyleSetting.key.in_(STYLE_KEYS),
        ).first() is not None

    def load(self, form_id) -> StyleSettings:
        """Read every stored key for one form into a StyleSettings record."""
        rows = FormStyleSetting.query.filter_by(form_id=form_id).all()
        return StyleSettings.from_mapping({row.key: row.value for row in rows})

    def load_many(self, form_ids: Iterable) -> Dict[Any, StyleSettings]:
        """One query for all forms on a page; forms without rows get an empty record."""
        form_ids = list(form_ids)
        if not form_ids:
            return {}
        raw: Dict[Any, Dict[str, str]] = {form_id: {} for form_id in form_ids}
        rows = FormStyleSetting.query.filter(FormStyleSetting.form_id.in_(form_ids)).all()
        for row in rows:
            raw.setdefault(row.form_id, {})[row.key] = row.value
        return {form_id: StyleSettings.from_mapping(values) for form_id, values in raw.items()}

    def purge(self, form_id=None) -> int:
        """Delete stored style settings for one form, or for every form."""
        query = FormStyleSetting.query.filter(FormStyleSetting.key.in_(STYLE_KEYS))
        if form_id is not None:
            query = query.filter(FormStyleSetting.form_id == form_id)
        return query.delete(synchronize_session=False)


settings_store = SettingsStore()
