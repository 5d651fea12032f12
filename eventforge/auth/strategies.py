"""
Auth Strategies

Interchangeable ways of turning a request into an ``Identity``. One
strategy is chosen at startup from AUTH_STRATEGY.

``resolve_identity`` returns ``None`` when the request carries no
credential at all and raises ``AuthenticationError`` when it carries a bad
one, so the route guard can report the two cases differently.
"""

import logging

from flask import current_app, session
from flask_login import UserMixin, current_user, login_user, logout_user

from eventforge.auth.sessions import rotate_session_id
from eventforge.auth.tokens import Identity
from eventforge.errors import AuthenticationError
from eventforge.extensions import login_manager
from eventforge.storage import get_storage
from eventforge.storage.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'eventforge.auth_strategy'


class LoginUser(UserMixin):
    """Minimal user object handed to Flask-Login."""

    def __init__(self, id, username):
        self.id = id
        self.username = username


@login_manager.user_loader
def load_user(user_id):
    try:
        row = get_storage().users.get(int(user_id))
    except (TypeError, ValueError):
        return None
    if row is None:
        return None
    return LoginUser(row['id'], row['username'])


class AuthStrategy:
    name = None

    def resolve_identity(self, request):
        raise NotImplementedError

    def start_session(self, identity):
        """Hook run after a successful login or registration."""

    def end_session(self):
        """Hook run on logout."""


class TokenStrategy(AuthStrategy):
    """``Authorization: Bearer <token>``"""
    name = 'token'

    def __init__(self, tokens):
        self.tokens = tokens

    def resolve_identity(self, request):
        header = request.headers.get('Authorization')
        if header is None or not header.strip():
            return None

        parts = header.split(' ')
        if len(parts) != 2 or parts[0] != 'Bearer' or not parts[1]:
            raise AuthenticationError('Invalid authentication format')

        identity = self.tokens.verify(parts[1])
        if identity is None:
            raise AuthenticationError('Invalid or expired token')
        return identity


class SessionStrategy(AuthStrategy):
    """Cookie session backed by the server-side session store."""
    name = 'session'

    def resolve_identity(self, request):
        if getattr(session, 'store_unavailable', False):
            raise StoreUnavailableError()
        if not current_user.is_authenticated:
            return None
        return Identity(id=int(current_user.id), username=current_user.username)

    def start_session(self, identity):
        rotate_session_id(session, current_app.session_interface)
        login_user(LoginUser(identity.id, identity.username))
        session.permanent = True
        logger.info('Session started for %s', identity.username)

    def end_session(self):
        logout_user()
        session.clear()


class HybridStrategy(AuthStrategy):
    """Bearer token when the header is present, otherwise the session."""
    name = 'hybrid'

    def __init__(self, tokens):
        self.token_strategy = TokenStrategy(tokens)
        self.session_strategy = SessionStrategy()

    def resolve_identity(self, request):
        identity = self.token_strategy.resolve_identity(request)
        if identity is not None:
            return identity
        return self.session_strategy.resolve_identity(request)

    def start_session(self, identity):
        self.session_strategy.start_session(identity)

    def end_session(self):
        self.session_strategy.end_session()


def build_strategy(name, tokens):
    if name == 'token':
        return TokenStrategy(tokens)
    if name == 'session':
        return SessionStrategy()
    if name == 'hybrid':
        return HybridStrategy(tokens)
    raise ValueError(f'Unknown AUTH_STRATEGY {name!r}; expected token, session or hybrid')


def get_auth_strategy():
    return current_app.extensions[EXTENSION_KEY]
