"""
Portfolio Blueprint
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api/portfolio')

from eventforge.portfolio import routes  # noqa: E402, F401
