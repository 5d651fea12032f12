"""
Auth Session Model

Server-side storage for cookie sessions when AUTH_STRATEGY is 'session' or
'hybrid'.
"""

from eventforge.extensions import db


class AuthSession(db.Model):
    __tablename__ = 'auth_sessions'

    sid = db.Column(db.String(64), primary_key=True)
    data = db.Column(db.JSON, nullable=False, default=dict)
    expires_at = db.Column(db.DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f'<AuthSession expires={self.expires_at}>'
