"""
Contact Submission Model
"""

from eventforge.extensions import db
from eventforge.utils import as_utc, utcnow


class ContactSubmission(db.Model):
    """Inquiry sent through the public contact form"""
    __tablename__ = 'contact_submissions'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    phone = db.Column(db.Text)
    event_type = db.Column(db.Text)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    read = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'event_type': self.event_type,
            'message': self.message,
            'created_at': as_utc(self.created_at),
            'read': bool(self.read),
        }

    def __repr__(self):
        return f'<ContactSubmission {self.email} read={self.read}>'
