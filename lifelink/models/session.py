"""
Session Model
"""

from lifelink.extensions import db


class UserSession(db.Model):
    """Server-side login session keyed by the opaque cookie token"""
    __tablename__ = 'user_sessions'

    sid = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    user_email = db.Column(db.String(100), nullable=False)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    def __repr__(self):
        return f'<UserSession user:{self.user_id} expires:{self.expires_at}>'
