"""
Auth Blueprint

Login, registration, token verification and logout under /api/auth.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from eventforge.auth import routes  # noqa: E402, F401
