"""
Authorization Guard

Turns the session cookie into a Flask-Login principal and provides the
admin gate plus the per-resource ownership predicates used by deletion.
"""

from functools import wraps

from flask import jsonify
from flask_login import UserMixin, current_user


class Principal(UserMixin):
    """The authenticated actor, built only from server-side session data."""

    def __init__(self, session_data):
        self.id = session_data.user_id
        self.email = session_data.user_email
        self.is_admin = session_data.is_admin
        self.session_token = session_data.token

    def __repr__(self):
        return f'<Principal {self.email} admin={self.is_admin}>'


def is_admin(actor):
    return bool(actor is not None and getattr(actor, 'is_authenticated', False)
                and getattr(actor, 'is_admin', False))


def is_self(actor, target):
    """True when the actor's session email is the target account's email."""
    if actor is None or target is None or not getattr(actor, 'is_authenticated', False):
        return False
    return actor.email == target.email


def can_delete(actor, target):
    return is_admin(actor) or is_self(actor, target)


def admin_required(f):
    """Decorator for API mutations that only administrators may call.

    Fails with 403 instead of redirecting, since callers are scripts and XHR.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not is_admin(current_user):
            return jsonify({'error': 'Admin access required.'}), 403
        return f(*args, **kwargs)
    return wrapper
