from datetime import timedelta

from eventforge.auth.service import TOKENS_KEY
from eventforge.auth.tokens import Identity
from eventforge.storage import get_storage
from eventforge.utils import utcnow


def _login(client, username='admin', password='secret123'):
    return client.post('/api/auth/login', json={'username': username, 'password': password})


def test_login_returns_token_and_user(client, admin_user):
    response = _login(client)
    assert response.status_code == 200
    body = response.get_json()
    assert body['user'] == {'id': admin_user['id'], 'username': 'admin'}
    assert body['token']


def test_login_token_verifies(client, admin_user):
    token = _login(client).get_json()['token']
    response = client.get('/api/auth/verify', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 200
    assert response.get_json() == {'user': {'id': admin_user['id'], 'username': 'admin'}}


def test_wrong_password_and_unknown_user_look_the_same(client, admin_user):
    wrong_password = _login(client, password='nope')
    unknown_user = _login(client, username='ghost')
    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json() == {'message': 'Invalid username or password'}


def test_login_requires_both_fields(client):
    response = client.post('/api/auth/login', json={'username': 'admin'})
    assert response.status_code == 400
    body = response.get_json()
    assert body['message'] == 'Invalid login data'
    assert body['errors'][0]['field'] == 'password'


def test_login_with_non_json_body(client):
    response = client.post('/api/auth/login', data='username=admin', content_type='text/plain')
    assert response.status_code == 400
    assert response.get_json()['errors'][0]['type'] == 'body_type'


def test_register_creates_account_and_logs_in(client, app):
    response = client.post('/api/auth/register', json={'username': 'planner', 'password': 'hunter22'})
    assert response.status_code == 201
    body = response.get_json()
    assert body['user']['username'] == 'planner'
    assert 'password' not in body['user']
    assert 'passwordHash' not in body['user']

    with app.app_context():
        stored = get_storage().users.get_by_username('planner')
    assert stored['password_hash'] != 'hunter22'
    assert _login(client, 'planner', 'hunter22').status_code == 200


def test_register_duplicate_username_conflicts(client, admin_user):
    response = client.post('/api/auth/register', json={'username': 'admin', 'password': 'another1'})
    assert response.status_code == 409
    assert response.get_json() == {'message': 'Username already exists'}


def test_register_validates_input(client):
    response = client.post('/api/auth/register', json={'username': 'ab', 'password': '1'})
    assert response.status_code == 400
    fields = {error['field'] for error in response.get_json()['errors']}
    assert fields == {'username', 'password'}


def test_verify_without_header(client):
    response = client.get('/api/auth/verify')
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Authentication required'}
    assert response.headers['WWW-Authenticate'] == 'Bearer'


def test_verify_with_malformed_header(client):
    for header in ('Token abc', 'Bearer', 'Bearer a b', 'bearer abc'):
        response = client.get('/api/auth/verify', headers={'Authorization': header})
        assert response.status_code == 401
        assert response.get_json() == {'message': 'Invalid authentication format'}


def test_verify_with_bad_token(client):
    response = client.get('/api/auth/verify', headers={'Authorization': 'Bearer not.a.token'})
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Invalid or expired token'}


def test_verify_with_expired_token(app, client, admin_user):
    with app.app_context():
        tokens = app.extensions[TOKENS_KEY]
        token = tokens.issue(Identity(admin_user['id'], 'admin'), now=utcnow() - timedelta(hours=25))
    response = client.get('/api/auth/verify', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Invalid or expired token'}


def test_verify_for_deleted_user(app, client, admin_user, auth_headers):
    with app.app_context():
        get_storage().users.delete(admin_user['id'])
    response = client.get('/api/auth/verify', headers=auth_headers)
    assert response.status_code == 401
    assert response.get_json() == {'message': 'User not found'}


def test_logout_is_a_no_op_for_tokens(client, auth_headers):
    assert client.post('/api/auth/logout').status_code == 204
    # Tokens are stateless; the same token keeps working until it expires
    assert client.get('/api/auth/verify', headers=auth_headers).status_code == 200
