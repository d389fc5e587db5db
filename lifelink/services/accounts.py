"""
Account Service

Registration, login, logout and account deletion, composed from the user
store, the credential helpers and the session manager.
"""

import logging

from email_validator import EmailNotValidError, validate_email

from lifelink.guard import can_delete
from lifelink.constants import BLOOD_TYPE_SET, NAGPUR_AREA_SET
from lifelink.errors import BackendUnavailable, DuplicateEmail, Forbidden, NotFound, ValidationError
from lifelink.services.credentials import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


def _as_text(value):
    return '' if value is None else str(value)


def _text(form, key):
    return _as_text(form.get(key))


def _accepted(value):
    if isinstance(value, bool):
        return value
    return str(value or '').strip().lower() in ('1', 'true', 'on', 'yes')


def _valid_email(email):
    try:
        validate_email(email, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def validate_registration(form):
    """Return every field error for a registration form, keyed by field."""
    errors = {}
    full_name = _text(form, 'fullName').strip()
    email = _text(form, 'email')
    password = _text(form, 'password')
    blood_type = _text(form, 'bloodType')
    city = _text(form, 'city')

    if len(full_name) < MIN_NAME_LENGTH:
        errors['fullName'] = 'Full name must be at least 2 characters.'
    if not email or not _valid_email(email):
        errors['email'] = 'Invalid email.'
    if len(password) < MIN_PASSWORD_LENGTH:
        errors['password'] = 'Password must be at least 8 characters.'
    if password != _text(form, 'confirmPassword'):
        errors['confirmPassword'] = 'Passwords do not match.'
    if not blood_type:
        errors['bloodType'] = 'Blood type required.'
    elif blood_type not in BLOOD_TYPE_SET:
        errors['bloodType'] = 'Select a valid blood type.'
    if not city:
        errors['city'] = 'City required.'
    elif city not in NAGPUR_AREA_SET:
        errors['city'] = 'Select valid Nagpur area.'
    if not _accepted(form.get('termsAccepted')):
        errors['termsAccepted'] = 'You must agree to terms.'
    return errors


class AccountService:

    def __init__(self, users, sessions):
        self.users = users
        self.sessions = sessions

    def register(self, form):
        """Create a donor account from a registration form.

        Raises DuplicateEmail (with all other field errors included) when the
        email is taken, ValidationError for any other invalid field.
        """
        errors = validate_registration(form)
        email = _text(form, 'email')
        if email and self.users.find_by_email(email) is not None:
            raise DuplicateEmail(errors)
        if errors:
            raise ValidationError(errors)

        return self.users.create(
            full_name=_text(form, 'fullName'),
            email=email,
            password_hash=hash_password(_text(form, 'password')),
            blood_type=_text(form, 'bloodType'),
            city=_text(form, 'city'),
            phone=_text(form, 'phone').strip() or None,
        )

    def login(self, email, password):
        """Check credentials and return a new session token."""
        email, password = _as_text(email), _as_text(password)
        if not email or not password:
            raise ValidationError({'general': 'Email and password required.'})
        user = self.users.find_by_email(email)
        if user is None:
            raise ValidationError({'email': 'Email not registered.'})
        if not verify_password(password, user.password_hash):
            raise ValidationError({'password': 'Incorrect password.'})

        token = self.sessions.create(user.id, user.email, user.is_admin)
        logger.info('User %s logged in', user.email)
        return token

    def logout(self, token):
        self.sessions.destroy(token)

    def delete_account(self, actor, target_id):
        """Delete `target_id` if the actor is an admin or the account owner."""
        target = self.users.find_by_id(target_id)
        if target is None:
            raise NotFound('Donor not found.')
        if not can_delete(actor, target):
            raise Forbidden('You can only delete your own account.')

        self.users.delete(target.id)
        try:
            self.sessions.destroy_for_user(target_id)
        except BackendUnavailable:
            logger.warning('Account %s deleted but its sessions could not be removed', target_id)
        logger.info('Account %s deleted by %s', target_id, actor.email)

    def seed_admin(self, email, password, full_name, blood_type, city):
        """Create the admin account, or promote it if it already exists."""
        user = self.users.find_by_email(email)
        if user is None:
            user = self.users.create(
                full_name=full_name,
                email=email,
                password_hash=hash_password(password),
                blood_type=blood_type,
                city=city,
            )
        if not user.is_admin:
            user = self.users.set_admin(user.id, True)
        return user
