"""
Auth Decorator

Route guard for mutating and admin-only endpoints.
"""

from functools import wraps

from flask import g, request

from eventforge.auth.strategies import get_auth_strategy
from eventforge.errors import AuthenticationError


def auth_required(f):
    """Reject the request with 401 unless the configured strategy resolves
    an identity. On success the identity is available as ``g.identity``.

    Verification has no side effects: tokens are not refreshed and
    sessions are not extended here.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        identity = get_auth_strategy().resolve_identity(request)
        if identity is None:
            raise AuthenticationError('Authentication required')
        g.identity = identity
        return f(*args, **kwargs)
    return wrapper
