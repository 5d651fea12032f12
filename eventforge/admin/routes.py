"""
Admin Routes

Every route here requires authentication. There are no roles: any
signed-in account may manage the others, but never delete itself.
"""

import logging

from flask import g, jsonify, request

from eventforge.admin import admin_bp
from eventforge.auth.decorators import auth_required
from eventforge.auth.service import create_account
from eventforge.errors import AuthorizationError, NotFoundError
from eventforge.schemas import NewUserRequest, UserOut, dump, dump_many, parse_body
from eventforge.storage import get_storage

logger = logging.getLogger(__name__)


@admin_bp.route('/users', methods=['GET'])
@auth_required
def list_users():
    return jsonify(dump_many(UserOut, get_storage().users.list()))


@admin_bp.route('/users', methods=['POST'])
@auth_required
def create_user():
    data = parse_body(NewUserRequest, request.get_json(silent=True), 'Invalid user data')
    user = create_account(data['username'], data['password'])
    logger.info('%s created user %s', g.identity.username, user['username'])
    return jsonify(dump(UserOut, user)), 201


@admin_bp.route('/users/<int:user_id>', methods=['DELETE'])
@auth_required
def delete_user(user_id):
    if user_id == g.identity.id:
        raise AuthorizationError('You cannot delete your own account')

    if not get_storage().users.delete(user_id):
        raise NotFoundError('User not found')

    logger.info('%s deleted user %s', g.identity.username, user_id)
    return '', 204
