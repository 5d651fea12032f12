"""
Contact Blueprint

The public contact form posts here; the admin inbox reads from here.
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api/contact')

from eventforge.contact import routes  # noqa: E402, F401
