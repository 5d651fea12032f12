import pytest

from eventforge import create_app
from eventforge.auth.service import create_account, issue_token
from eventforge.config import TestConfig
from eventforge.extensions import db


def _make_config(**overrides):
    """TestConfig subclass with a few settings replaced."""
    return type('OverriddenTestConfig', (TestConfig,), overrides)


@pytest.fixture()
def make_config():
    return _make_config


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_user(app):
    with app.app_context():
        return create_account('admin', 'secret123')


@pytest.fixture()
def auth_headers(app, admin_user):
    with app.app_context():
        token = issue_token(admin_user)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture()
def portfolio_payload():
    return {
        'title': 'Harbour Lights Gala',
        'category': 'Charity Event',
        'venue': 'Pier 7',
        'imageUrl': 'https://example.com/gala.jpg',
        'description': 'Waterfront fundraising dinner.',
        'overview': 'A 300 guest dinner with a live auction.',
        'role': 'Venue coordination\n\nAuction management\n',
        'results': 'Raised $400k.',
        'tags': 'Charity, Gala , ,Fundraising',
    }


@pytest.fixture()
def testimonial_payload():
    return {
        'rating': 4,
        'content': 'Smooth from start to finish.',
        'author': 'Dana Okafor',
        'position': 'COO, Brightline',
        'avatarInitials': 'DO',
    }
