"""
Pytest configuration and shared fixtures.
"""

import pytest
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set DATABASE_URL before Config class is imported (it validates at class-definition time)
os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')


@pytest.fixture
def app():
    """Create application for testing."""
    from paystyles import create_app
    app = create_app('testing')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    return app


@pytest.fixture
def app_context(app):
    """Application context for testing."""
    with app.app_context():
        yield


@pytest.fixture
def db(app, app_context):
    """Database for testing."""
    from paystyles import db as _db

    _db.create_all()
    yield _db
    _db.session.remove()
    _db.drop_all()


@pytest.fixture
def client(app, db):
    return app.test_client()


@pytest.fixture
def make_form(db):
    """Factory for PaymentForm rows."""
    from paystyles.models import PaymentForm

    def _make_form(title='Donation', display_type='embedded'):
        form = PaymentForm(title=title, display_type=display_type)
        db.session.add(form)
        db.session.commit()
        return form

    return _make_form
