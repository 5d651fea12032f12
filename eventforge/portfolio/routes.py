"""
Portfolio Routes

Public reads; creating, editing and deleting items requires authentication.
"""

from flask import jsonify, request

from eventforge.auth.decorators import auth_required
from eventforge.errors import NotFoundError
from eventforge.portfolio import portfolio_bp
from eventforge.schemas import (
    PortfolioItemCreate,
    PortfolioItemOut,
    PortfolioItemUpdate,
    dump,
    dump_many,
    parse_body,
)
from eventforge.storage import get_storage


@portfolio_bp.route('', methods=['GET'])
def list_items():
    items = get_storage().portfolio.list()
    return jsonify(dump_many(PortfolioItemOut, items))


@portfolio_bp.route('/<int:item_id>', methods=['GET'])
def get_item(item_id):
    item = get_storage().portfolio.get(item_id)
    if item is None:
        raise NotFoundError('Portfolio item not found')
    return jsonify(dump(PortfolioItemOut, item))


@portfolio_bp.route('', methods=['POST'])
@auth_required
def create_item():
    data = parse_body(PortfolioItemCreate, request.get_json(silent=True), 'Invalid portfolio item data')
    item = get_storage().portfolio.create(data)
    return jsonify(dump(PortfolioItemOut, item)), 201


@portfolio_bp.route('/<int:item_id>', methods=['PUT'])
@auth_required
def update_item(item_id):
    changes = parse_body(
        PortfolioItemUpdate, request.get_json(silent=True), 'Invalid portfolio item data', partial=True
    )
    item = get_storage().portfolio.update(item_id, changes)
    if item is None:
        raise NotFoundError('Portfolio item not found')
    return jsonify(dump(PortfolioItemOut, item))


@portfolio_bp.route('/<int:item_id>', methods=['DELETE'])
@auth_required
def delete_item(item_id):
    # 204 even when the item was already gone
    get_storage().portfolio.delete(item_id)
    return '', 204
