"""
Testimonials Blueprint
"""

from flask import Blueprint

testimonials_bp = Blueprint('testimonials', __name__, url_prefix='/api/testimonials')

from eventforge.testimonials import routes  # noqa: E402, F401
