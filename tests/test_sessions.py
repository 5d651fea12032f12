import pytest

from eventforge import create_app
from eventforge.auth.service import create_account
from eventforge.storage.errors import StoreUnavailableError
from eventforge.storage.memory import MemorySessionStore, MemoryStorage

COOKIE = 'eventforge_session'
CREDENTIALS = {'username': 'admin', 'password': 'secret123'}


def _app_with_user(config, storage=None):
    app = create_app(config, storage=storage)
    with app.app_context():
        create_account('admin', 'secret123')
    return app


@pytest.fixture(params=['sql', 'memory'])
def session_app(request, make_config):
    return _app_with_user(make_config(AUTH_STRATEGY='session', STORAGE_BACKEND=request.param))


@pytest.fixture()
def hybrid_app(make_config):
    return _app_with_user(make_config(AUTH_STRATEGY='hybrid'))


def test_login_sets_signed_http_only_cookie(session_app):
    client = session_app.test_client()
    response = client.post('/api/auth/login', json=CREDENTIALS)
    assert response.status_code == 200
    assert response.get_json()['user']['username'] == 'admin'

    header = next(value for value in response.headers.getlist('Set-Cookie') if value.startswith(COOKIE))
    assert 'HttpOnly' in header
    assert 'SameSite=Lax' in header
    assert client.get_cookie(COOKIE) is not None


def test_session_authenticates_follow_up_requests(session_app):
    client = session_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    response = client.get('/api/auth/verify')
    assert response.status_code == 200
    assert response.get_json()['user']['username'] == 'admin'


def test_no_cookie_means_no_identity(session_app):
    response = session_app.test_client().get('/api/auth/verify')
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Authentication required'}


def test_session_mode_ignores_bearer_tokens(session_app):
    token = session_app.test_client().post('/api/auth/login', json=CREDENTIALS).get_json()['token']
    response = session_app.test_client().get('/api/auth/verify', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 401


def test_tampered_cookie_is_ignored(session_app):
    client = session_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    client.set_cookie(COOKIE, client.get_cookie(COOKIE).value + 'x')
    assert client.get('/api/auth/verify').status_code == 401


def test_logout_ends_the_session(session_app):
    client = session_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    stolen = client.get_cookie(COOKIE).value

    assert client.post('/api/auth/logout').status_code == 204
    assert client.get('/api/auth/verify').status_code == 401

    # The old cookie is dead server-side too
    client.set_cookie(COOKIE, stolen)
    assert client.get('/api/auth/verify').status_code == 401


def test_login_rotates_session_id(session_app):
    client = session_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    first = client.get_cookie(COOKIE).value
    client.post('/api/auth/login', json=CREDENTIALS)
    second = client.get_cookie(COOKIE).value
    assert first != second

    client.set_cookie(COOKIE, first)
    assert client.get('/api/auth/verify').status_code == 401


def test_verifying_does_not_rewrite_the_cookie(session_app):
    client = session_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    response = client.get('/api/auth/verify')
    assert response.status_code == 200
    assert not any(value.startswith(COOKIE) for value in response.headers.getlist('Set-Cookie'))


def test_session_protects_mutating_routes(session_app, portfolio_payload):
    client = session_app.test_client()
    assert client.post('/api/portfolio', json=portfolio_payload).status_code == 401
    client.post('/api/auth/login', json=CREDENTIALS)
    assert client.post('/api/portfolio', json=portfolio_payload).status_code == 201


def test_hybrid_accepts_a_bearer_token(hybrid_app):
    token = hybrid_app.test_client().post('/api/auth/login', json=CREDENTIALS).get_json()['token']
    response = hybrid_app.test_client().get('/api/auth/verify', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 200


def test_hybrid_accepts_a_session(hybrid_app):
    client = hybrid_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    assert client.get('/api/auth/verify').status_code == 200


def test_hybrid_bad_token_is_not_rescued_by_the_session(hybrid_app):
    client = hybrid_app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)
    response = client.get('/api/auth/verify', headers={'Authorization': 'Bearer forged'})
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Invalid or expired token'}


class FlakySessionStore(MemorySessionStore):

    def __init__(self):
        super().__init__()
        self.broken = False

    def load(self, sid):
        if self.broken:
            raise StoreUnavailableError()
        return super().load(sid)


def test_session_store_outage_is_a_503(make_config):
    storage = MemoryStorage()
    storage.sessions = FlakySessionStore()
    app = _app_with_user(make_config(AUTH_STRATEGY='session', STORAGE_BACKEND='memory'), storage=storage)
    client = app.test_client()
    client.post('/api/auth/login', json=CREDENTIALS)

    storage.sessions.broken = True
    response = client.get('/api/auth/verify')
    assert response.status_code == 503
    assert response.get_json() == {'message': 'Service temporarily unavailable'}

    # Public routes and the health check keep working
    assert client.get('/api/health').status_code == 200
    assert client.get('/api/portfolio').status_code == 200

    storage.sessions.broken = False
    assert client.get('/api/auth/verify').status_code == 200
