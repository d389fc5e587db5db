"""
Credential Service

Password hashing and verification on top of werkzeug.security.
"""

from werkzeug.security import generate_password_hash, check_password_hash

HASH_METHOD = 'pbkdf2:sha256'


def hash_password(password):
    """Return a salted one-way hash; a fresh salt is drawn on every call."""
    return generate_password_hash(password, method=HASH_METHOD)


def verify_password(password, password_hash):
    """Check `password` against a stored hash without raising on bad input."""
    if not password_hash or password is None:
        return False
    try:
        return check_password_hash(password_hash, password)
    except (ValueError, TypeError, AttributeError):
        return False
