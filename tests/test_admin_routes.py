"""
Tests for the admin form and style endpoints.

Covers:
- Form creation, validation and deletion (styles go with the form)
- Reading a form's style state
- Saving flat submissions (JSON and form-encoded), reset
- Applying theme presets
"""

import pytest
from paystyles.styles.store import settings_store


@pytest.fixture
def form(make_form):
    return make_form(display_type='embedded')


@pytest.fixture
def offsite_form(make_form):
    return make_form(title='Hosted checkout', display_type='stripe_checkout')


# ---------------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------------

class TestForms:
    """Tests for form create/list/delete."""

    def test_create_form(self, client):
        resp = client.post('/admin/forms', json={'title': 'Donate', 'display_type': 'overlay'})
        assert resp.status_code == 201
        data = resp.get_json()
        assert data['title'] == 'Donate'
        assert data['display_type'] == 'overlay'
        assert data['on_site'] is True
        assert data['suggested'] == {}

    def test_create_form_defaults_to_embedded(self, client):
        resp = client.post('/admin/forms', data={'title': 'Donate'})
        assert resp.status_code == 201
        assert resp.get_json()['display_type'] == 'embedded'

    def test_create_form_requires_title(self, client):
        resp = client.post('/admin/forms', json={'display_type': 'embedded'})
        assert resp.status_code == 400
        assert 'title' in resp.get_json()['errors']

    def test_create_form_rejects_unknown_display_type(self, client):
        resp = client.post('/admin/forms', json={'title': 'X', 'display_type': 'popup'})
        assert resp.status_code == 400
        assert 'display_type' in resp.get_json()['errors']

    def test_create_form_suggests_configured_radius(self, app, client):
        app.config['NEW_FORM_DEFAULT_BORDER_RADIUS'] = 4
        resp = client.post('/admin/forms', json={'title': 'X'})
        assert resp.get_json()['suggested'] == {'border_radius': 4}

    def test_list_forms(self, client, form, offsite_form):
        resp = client.get('/admin/forms')
        forms = resp.get_json()['forms']
        assert [f['id'] for f in forms] == [form.id, offsite_form.id]
        assert [f['on_site'] for f in forms] == [True, False]

    def test_delete_form_removes_styles(self, client, db, form):
        from paystyles.models import FormStyleSetting
        settings_store.set(form.id, 'text_color', '#000000')
        db.session.commit()
        form_id = form.id

        resp = client.delete(f'/admin/forms/{form_id}')
        assert resp.status_code == 200
        assert resp.get_json() == {'deleted': form_id}
        assert FormStyleSetting.query.filter_by(form_id=form_id).count() == 0

    def test_delete_unknown_form(self, client):
        resp = client.delete('/admin/forms/999')
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'not_found'


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

class TestGetStyles:
    """Tests for GET /admin/forms/<id>/styles."""

    def test_new_form(self, client, form):
        data = client.get(f'/admin/forms/{form.id}/styles').get_json()
        assert data['is_new'] is True
        assert data['on_site'] is True
        assert data['selected_theme'] == 'default'
        assert data['settings'] == {}
        assert 'midnight' in data['themes']
        assert data['font_weights']['500'] == '500 (Medium)'
        assert 'message' not in data

    def test_off_site_form_has_message(self, client, offsite_form):
        data = client.get(f'/admin/forms/{offsite_form.id}/styles').get_json()
        assert data['on_site'] is False
        assert 'embedded and overlay' in data['message']

    def test_unknown_form(self, client):
        resp = client.get('/admin/forms/999/styles')
        assert resp.status_code == 404
        assert resp.get_json()['message'] == 'The requested form does not exist.'


class TestSaveStyles:
    """Tests for POST /admin/forms/<id>/styles."""

    def test_save_json(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles', json={
            'text_color': '#111111',
            'border_radius': 0,
            'label_font_weight': 'heavy',
            'custom_css': 'body { display: none }',
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['saved'] == ['text_color', 'border_radius', 'label_font_weight']
        assert data['settings'] == {
            'text_color': '#111111',
            'border_radius': 0,
            'label_font_weight': 'normal',
        }
        assert data['is_new'] is False

    def test_save_form_encoded(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles', data={
            'primary_color': '#0f8569',
            'input_font_size': '15px',
        })
        assert resp.get_json()['settings'] == {'primary_color': '#0f8569', 'input_font_size': 15}

    def test_omitted_keys_are_deleted(self, client, db, form):
        settings_store.set(form.id, 'border_color', '#cccccc')
        db.session.commit()
        resp = client.post(f'/admin/forms/{form.id}/styles', json={'text_color': '#000000'})
        data = resp.get_json()
        assert data['deleted'] == ['border_color']
        assert data['settings'] == {'text_color': '#000000'}

    def test_reset(self, client, db, form):
        settings_store.set(form.id, 'text_color', '#000000')
        db.session.commit()
        resp = client.post(f'/admin/forms/{form.id}/styles', json={'reset': True, 'text_color': '#ffffff'})
        data = resp.get_json()
        assert data['reset'] is True
        assert data['deleted'] == ['text_color']
        assert data['settings'] == {}
        assert data['is_new'] is True

    def test_reset_false_saves(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles', json={'reset': False, 'text_color': '#ffffff'})
        data = resp.get_json()
        assert data['reset'] is False
        assert data['settings'] == {'text_color': '#ffffff'}

    def test_rejects_non_object_json(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles', json=['text_color'])
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'bad_request'

    def test_off_site_form_is_cleared(self, client, db, offsite_form):
        settings_store.set(offsite_form.id, 'text_color', '#000000')
        db.session.commit()
        resp = client.post(f'/admin/forms/{offsite_form.id}/styles', json={'text_color': '#ffffff'})
        data = resp.get_json()
        assert data['saved'] == []
        assert data['settings'] == {}


class TestApplyTheme:
    """Tests for POST /admin/forms/<id>/styles/theme."""

    def test_apply_midnight(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles/theme', json={'theme_id': 'midnight'})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['selected_theme'] == 'midnight'
        assert data['settings']['border_radius'] == 0
        assert data['settings']['label_font_weight'] == 'bold'
        assert data['settings']['input_text_color'] == '#ffffff'
        assert data['applied'] == data['settings']

    def test_apply_with_overrides(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles/theme', json={
            'theme_id': 'ocean',
            'overrides': {'border_radius': 10},
        })
        assert resp.get_json()['settings']['border_radius'] == 10

    def test_unknown_theme_resolves_default(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles/theme', data={'theme_id': 'nope'})
        assert resp.get_json()['selected_theme'] == 'default'

    def test_missing_theme_id(self, client, form):
        resp = client.post(f'/admin/forms/{form.id}/styles/theme', json={})
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'invalid_theme'

    def test_off_site_form(self, client, offsite_form):
        resp = client.post(f'/admin/forms/{offsite_form.id}/styles/theme', json={'theme_id': 'ocean'})
        assert resp.status_code == 409
        assert resp.get_json()['error'] == 'form_off_site'
