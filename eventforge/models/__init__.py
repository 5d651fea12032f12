"""
Models Package

Exports all models for easy importing.
"""

from eventforge.models.user import User
from eventforge.models.portfolio import PortfolioItem
from eventforge.models.testimonial import Testimonial
from eventforge.models.contact import ContactSubmission
from eventforge.models.session import AuthSession

__all__ = ['User', 'PortfolioItem', 'Testimonial', 'ContactSubmission', 'AuthSession']
