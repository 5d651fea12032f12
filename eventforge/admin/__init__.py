"""
Admin Blueprint

Management of the accounts that can sign in to the dashboard.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')

from eventforge.admin import routes  # noqa: E402, F401
