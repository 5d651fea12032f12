"""
Auth Routes

JSON login and registration. Both answer ``{token, user}``; under the
session strategies they also start a server-side session.
"""

from flask import g, jsonify, request

from eventforge.auth import auth_bp
from eventforge.auth.decorators import auth_required
from eventforge.auth.service import authenticate, create_account, identity_for, issue_token
from eventforge.auth.strategies import get_auth_strategy
from eventforge.errors import AuthenticationError
from eventforge.schemas import LoginRequest, NewUserRequest, UserOut, dump, parse_body
from eventforge.storage import get_storage


def _session_response(user, status=200):
    get_auth_strategy().start_session(identity_for(user))
    body = {'token': issue_token(user), 'user': dump(UserOut, user)}
    return jsonify(body), status


@auth_bp.route('/login', methods=['POST'])
def login():
    """Exchange username and password for a token."""
    data = parse_body(LoginRequest, request.get_json(silent=True), 'Invalid login data')

    user = authenticate(data['username'], data['password'])
    if user is None:
        raise AuthenticationError('Invalid username or password')

    return _session_response(user)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an account and log it in."""
    data = parse_body(NewUserRequest, request.get_json(silent=True), 'Invalid registration data')
    user = create_account(data['username'], data['password'])
    return _session_response(user, 201)


@auth_bp.route('/verify', methods=['GET'])
@auth_required
def verify():
    """Confirm the caller's credential and return the current user."""
    user = get_storage().users.get(g.identity.id)
    if user is None:
        raise AuthenticationError('User not found')
    return jsonify({'user': dump(UserOut, user)})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """End the session, if any. Tokens are stateless and simply expire."""
    get_auth_strategy().end_session()
    return '', 204
