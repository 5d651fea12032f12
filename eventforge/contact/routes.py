"""
Contact Routes
"""

import logging

from flask import jsonify, request

from eventforge.auth.decorators import auth_required
from eventforge.contact import contact_bp
from eventforge.errors import NotFoundError
from eventforge.schemas import ContactSubmissionCreate, ContactSubmissionOut, dump, dump_many, parse_body
from eventforge.storage import get_storage

logger = logging.getLogger(__name__)


@contact_bp.route('', methods=['POST'])
def submit():
    """Anonymous contact form submission."""
    data = parse_body(ContactSubmissionCreate, request.get_json(silent=True), 'Invalid contact submission data')
    submission = get_storage().contacts.create(data)
    logger.info('New contact submission %s', submission['id'])
    return jsonify(dump(ContactSubmissionOut, submission)), 201


@contact_bp.route('', methods=['GET'])
@auth_required
def list_submissions():
    submissions = get_storage().contacts.list()
    return jsonify(dump_many(ContactSubmissionOut, submissions))


@contact_bp.route('/<int:submission_id>/read', methods=['PATCH'])
@auth_required
def mark_read(submission_id):
    submission = get_storage().contacts.mark_read(submission_id)
    if submission is None:
        raise NotFoundError('Contact submission not found')
    return jsonify(dump(ContactSubmissionOut, submission))


@contact_bp.route('/<int:submission_id>', methods=['DELETE'])
@auth_required
def delete_submission(submission_id):
    get_storage().contacts.delete(submission_id)
    return '', 204
