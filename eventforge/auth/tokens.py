"""
Token Service

Issues and verifies HS256 bearer tokens carrying ``{id, username}``.
Verification never touches server state.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

import jwt

from eventforge.utils import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """The authenticated actor attached to a request."""
    id: int
    username: str

    def to_dict(self):
        return {'id': self.id, 'username': self.username}


class TokenService:
    """Signs and checks access tokens with a server-held secret."""

    def __init__(self, secret, ttl=timedelta(hours=24), algorithm='HS256'):
        if not secret:
            raise ValueError('token secret must not be blank')
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, identity, now=None):
        issued_at = now or utcnow()
        payload = {
            'sub': str(identity.id),
            'id': identity.id,
            'username': identity.username,
            'iat': int(issued_at.timestamp()),
            'exp': int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token):
        """Return the ``Identity`` in ``token``, or ``None`` if it is unusable."""
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={'require': ['exp', 'sub']},
            )
        except jwt.ExpiredSignatureError:
            logger.info('Rejected expired token')
            return None
        except jwt.InvalidTokenError as exc:
            logger.info('Rejected invalid token: %s', exc.__class__.__name__)
            return None

        user_id = payload.get('id')
        username = payload.get('username')
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
            logger.info('Rejected token with malformed identity claims')
            return None
        return Identity(id=user_id, username=username)
