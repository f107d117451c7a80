"""
Tests for admin-side style operations and page rendering integration.
"""

import pytest
from markupsafe import Markup

from paystyles.styles.constants import STYLE_KEYS
from paystyles.styles.render import (
    build_elements_config,
    build_page_styles,
    normalize_form_ids,
    on_site_forms,
    render_style_tag,
)
from paystyles.styles.service import apply_theme, is_on_site, save_style_settings, suggested_defaults
from paystyles.styles.store import settings_store


@pytest.fixture
def form(make_form):
    return make_form(display_type='embedded')


@pytest.fixture
def offsite_form(make_form):
    return make_form(title='Hosted checkout', display_type='stripe_checkout')


# ---------------------------------------------------------------------------
# Save / reset / theme
# ---------------------------------------------------------------------------

class TestSaveStyleSettings:
    """Tests for save_style_settings."""

    def test_is_on_site(self, db, form, offsite_form, make_form):
        assert is_on_site(form)
        assert is_on_site(make_form(display_type='overlay'))
        assert not is_on_site(offsite_form)
        assert not is_on_site(None)

    def test_saves_submitted_keys(self, db, form):
        result = save_style_settings(form, {'text_color': '#111111', 'border_radius': '0'})
        db.session.commit()
        assert result['saved'] == ['text_color', 'border_radius']
        assert result['deleted'] == []
        assert settings_store.get(form.id, 'border_radius') == 0

    def test_unsubmitted_keys_are_deleted(self, db, form):
        settings_store.set(form.id, 'border_color', '#cccccc')
        settings_store.set(form.id, 'text_color', '#000000')
        db.session.commit()

        result = save_style_settings(form, {'text_color': '#222222'})
        db.session.commit()
        assert result['deleted'] == ['border_color']
        assert not settings_store.exists(form.id, 'border_color')
        assert settings_store.get(form.id, 'text_color') == '#222222'

    def test_unknown_keys_are_ignored(self, db, form):
        result = save_style_settings(form, {'custom_css': 'body{}'})
        db.session.commit()
        assert result == {'saved': [], 'deleted': []}
        assert not settings_store.has_any(form.id)

    def test_off_site_form_clears_styles(self, db, offsite_form):
        settings_store.set(offsite_form.id, 'text_color', '#000000')
        db.session.commit()

        result = save_style_settings(offsite_form, {'text_color': '#ffffff', 'border_radius': 3})
        db.session.commit()
        assert result == {'saved': [], 'deleted': ['text_color']}
        assert not settings_store.has_any(offsite_form.id)

    def test_reset_deletes_everything(self, db, form):
        settings_store.set(form.id, 'text_color', '#000000')
        settings_store.set(form.id, 'border_radius', 0)
        db.session.commit()

        result = save_style_settings(form, {'text_color': '#ffffff'}, reset=True)
        db.session.commit()
        assert result['saved'] == []
        assert sorted(result['deleted']) == ['border_radius', 'text_color']
        assert not settings_store.has_any(form.id)


class TestApplyTheme:
    """Tests for apply_theme."""

    def test_stores_full_record(self, db, form):
        resolved = apply_theme(form, 'midnight')
        db.session.commit()
        for key in STYLE_KEYS:
            assert settings_store.exists(form.id, key), key
        assert settings_store.load(form.id) == resolved
        assert settings_store.get(form.id, 'border_radius', 4) == 0

    def test_round_trip_through_store(self, db, form):
        apply_theme(form, 'midnight')
        db.session.commit()
        loaded = settings_store.load(form.id)
        assert loaded.selected_theme == 'midnight'
        assert loaded.label_font_weight == 'bold'
        assert loaded.input_text_color == '#ffffff'

    def test_overrides(self, db, form):
        apply_theme(form, 'ocean', {'border_radius': 12})
        db.session.commit()
        assert settings_store.get(form.id, 'border_radius') == 12


class TestSuggestedDefaults:
    """Tests for suggested_defaults."""

    def test_nothing_suggested_by_default(self, db, form):
        assert suggested_defaults(form) == {}

    def test_configured_radius_for_new_forms_only(self, app, db, form):
        app.config['NEW_FORM_DEFAULT_BORDER_RADIUS'] = 6
        assert suggested_defaults(form) == {'border_radius': 6}
        assert not settings_store.exists(form.id, 'border_radius')

        settings_store.set(form.id, 'text_color', '#000000')
        db.session.commit()
        assert suggested_defaults(form) == {}


# ---------------------------------------------------------------------------
# Page rendering
# ---------------------------------------------------------------------------

class TestNormalizeFormIds:
    """Tests for normalize_form_ids."""

    def test_filters_and_dedupes(self):
        assert normalize_form_ids(['3', 3, 'x', -1, 0, ' 5 ', None, 5]) == [3, 5]

    def test_empty(self):
        assert normalize_form_ids(None) == []
        assert normalize_form_ids([]) == []


class TestElementsConfig:
    """Tests for build_elements_config."""

    def test_on_site_form_gets_appearance(self, db, form):
        settings_store.set(form.id, 'primary_color', '#0f8569')
        db.session.commit()
        config = build_elements_config(form.id, {'locale': 'en'})
        assert config['locale'] == 'en'
        assert config['appearance']['variables'] == {'colorPrimary': '#0f8569'}

    def test_off_site_form_is_untouched(self, db, offsite_form):
        settings_store.set(offsite_form.id, 'primary_color', '#0f8569')
        db.session.commit()
        config = {'locale': 'en'}
        assert build_elements_config(offsite_form.id, config) == {'locale': 'en'}

    def test_unknown_form_is_untouched(self, db):
        assert build_elements_config(404, {'a': 1}) == {'a': 1}
        assert build_elements_config('junk', None) == {}


class TestPageStyles:
    """Tests for build_page_styles and render_style_tag."""

    def test_no_forms(self, db):
        assert build_page_styles([]) == ''
        assert render_style_tag('') == Markup('')

    def test_off_site_forms_are_skipped(self, db, form, offsite_form):
        assert [f.id for f in on_site_forms([offsite_form.id, form.id])] == [form.id]
        css = build_page_styles([offsite_form.id, form.id])
        assert f'[data-form-id="{form.id}"]' in css
        assert f'[data-form-id="{offsite_form.id}"]' not in css

    def test_only_off_site_forms_gives_no_css(self, db, offsite_form):
        assert build_page_styles([offsite_form.id]) == ''

    def test_two_forms(self, db, make_form):
        first, second = make_form(), make_form()
        apply_theme(first, 'sunset')
        apply_theme(second, 'forest')
        db.session.commit()
        css = build_page_styles([first.id, second.id])
        assert css.count('.simpay-checkout-btn,\n.simpay-apply-coupon {') == 1
        assert '#e74c3c' in css and '#27ae60' in css

    def test_style_tag(self, app, db, form):
        tag = render_style_tag(build_page_styles([form.id]))
        assert isinstance(tag, Markup)
        assert tag.startswith('\n<style id="paystyles-inline-styles">\n')
        assert tag.endswith('</style>\n')
        assert 'border-radius: 0px !important;' in tag
