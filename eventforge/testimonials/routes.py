"""
Testimonial Routes
"""

from flask import jsonify, request

from eventforge.auth.decorators import auth_required
from eventforge.errors import NotFoundError
from eventforge.schemas import (
    TestimonialCreate,
    TestimonialOut,
    TestimonialUpdate,
    dump,
    dump_many,
    parse_body,
)
from eventforge.storage import get_storage
from eventforge.testimonials import testimonials_bp


@testimonials_bp.route('', methods=['GET'])
def list_testimonials():
    testimonials = get_storage().testimonials.list()
    return jsonify(dump_many(TestimonialOut, testimonials))


@testimonials_bp.route('/<int:testimonial_id>', methods=['GET'])
def get_testimonial(testimonial_id):
    testimonial = get_storage().testimonials.get(testimonial_id)
    if testimonial is None:
        raise NotFoundError('Testimonial not found')
    return jsonify(dump(TestimonialOut, testimonial))


@testimonials_bp.route('', methods=['POST'])
@auth_required
def create_testimonial():
    data = parse_body(TestimonialCreate, request.get_json(silent=True), 'Invalid testimonial data')
    testimonial = get_storage().testimonials.create(data)
    return jsonify(dump(TestimonialOut, testimonial)), 201


@testimonials_bp.route('/<int:testimonial_id>', methods=['PUT'])
@auth_required
def update_testimonial(testimonial_id):
    changes = parse_body(
        TestimonialUpdate, request.get_json(silent=True), 'Invalid testimonial data', partial=True
    )
    testimonial = get_storage().testimonials.update(testimonial_id, changes)
    if testimonial is None:
        raise NotFoundError('Testimonial not found')
    return jsonify(dump(TestimonialOut, testimonial))


@testimonials_bp.route('/<int:testimonial_id>', methods=['DELETE'])
@auth_required
def delete_testimonial(testimonial_id):
    get_storage().testimonials.delete(testimonial_id)
    return '', 204
