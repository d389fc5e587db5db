"""
User Model
"""

from datetime import datetime, timezone

from lifelink.extensions import db


def utcnow():
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(db.Model):
    """A registered donor account"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    blood_type = db.Column(db.String(10), nullable=False, index=True)
    phone = db.Column(db.String(20))
    city = db.Column(db.String(100), nullable=False, index=True)
    # Role-based access control flag
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_summary(self):
        """Public view of the account; credential material is left out."""
        return {
            'id': self.id,
            'full_name': self.full_name,
            'email': self.email,
            'blood_type': self.blood_type,
            'phone': self.phone,
            'city': self.city,
            'is_admin': bool(self.is_admin),
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<User {self.email}>'
