"""
Flask Extensions

Shared extension instances, bound to the application in the factory.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for cookie-session authentication
login_manager = LoginManager()
