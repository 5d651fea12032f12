"""
Account Service

Registration, credential checks and token issuance shared by the auth and
admin blueprints.
"""

import logging

from flask import current_app

from eventforge.auth.passwords import hash_password, verify_password
from eventforge.auth.tokens import Identity
from eventforge.storage import get_storage

logger = logging.getLogger(__name__)

TOKENS_KEY = 'eventforge.tokens'


def get_token_service():
    return current_app.extensions[TOKENS_KEY]


def identity_for(user):
    return Identity(id=user['id'], username=user['username'])


def create_account(username, password):
    """Hash ``password`` and store a new user.

    Raises ``ConflictError`` when the username is taken.
    """
    password_hash = hash_password(password, method=current_app.config['PASSWORD_HASH_METHOD'])
    user = get_storage().users.create({'username': username, 'password_hash': password_hash})
    logger.info('Created user %s (id=%s)', user['username'], user['id'])
    return user


def authenticate(username, password):
    """Return the stored user for valid credentials, otherwise None."""
    user = get_storage().users.get_by_username(username)
    if user is None or not verify_password(password, user['password_hash']):
        logger.warning('Failed login for %s', username)
        return None
    return user


def issue_token(user):
    return get_token_service().issue(identity_for(user))
