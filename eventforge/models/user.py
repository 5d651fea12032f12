"""
User Model
"""

from eventforge.extensions import db


class User(db.Model):
    """Admin account able to manage site content"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'password_hash': self.password_hash,
        }

    def __repr__(self):
        return f'<User {self.username}>'
