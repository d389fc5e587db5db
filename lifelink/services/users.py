"""
User Store

Persistence for donor accounts. The unique constraint on `users.email` is the
authority on duplicates; a failed insert is reported as DuplicateEmail.
"""

import logging

from sqlalchemy.exc import IntegrityError

from lifelink.constants import BLOOD_TYPE_SET, NAGPUR_AREA_SET
from lifelink.errors import DuplicateEmail, NotFound, ValidationError
from lifelink.models import User
from lifelink.services.storage import guarded

logger = logging.getLogger(__name__)


class UserStore:
    """CRUD over the `users` table through an injected SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def create(self, full_name, email, password_hash, blood_type, city, phone=None):
        errors = {}
        if not full_name or not full_name.strip():
            errors['fullName'] = 'Full name required.'
        if not email:
            errors['email'] = 'Email required.'
        if not password_hash:
            errors['password'] = 'Password required.'
        if blood_type not in BLOOD_TYPE_SET:
            errors['bloodType'] = 'Select a valid blood type.'
        if city not in NAGPUR_AREA_SET:
            errors['city'] = 'Select valid Nagpur area.'
        if errors:
            raise ValidationError(errors)

        user = User(
            full_name=full_name.strip(),
            email=email,
            password_hash=password_hash,
            blood_type=blood_type,
            phone=phone or None,
            city=city,
        )
        with guarded(self.session, 'create user'):
            self.session.add(user)
            try:
                self.session.commit()
            except IntegrityError as e:
                self.session.rollback()
                raise DuplicateEmail() from e
            logger.info('Created user %s (id=%s)', user.email, user.id)
        return user

    def find_by_email(self, email):
        if not email:
            return None
        with guarded(self.session, 'look up user by email'):
            return self.session.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id):
        with guarded(self.session, 'look up user by id'):
            return self.session.get(User, user_id)

    def delete(self, user_id):
        """Permanently remove a user; raises NotFound when nothing was deleted."""
        with guarded(self.session, 'delete user'):
            deleted = self.session.query(User).filter(User.id == user_id).delete()
            self.session.commit()
        if not deleted:
            raise NotFound('Donor not found.')
        logger.info('Deleted user id=%s', user_id)

    def list(self, blood_type=None, city=None):
        """Users matching every given filter, newest first."""
        with guarded(self.session, 'list users'):
            query = self.session.query(User)
            if blood_type:
                query = query.filter(User.blood_type == blood_type)
            if city:
                query = query.filter(User.city == city)
            return query.order_by(User.created_at.desc(), User.id.desc()).all()

    def set_admin(self, user_id, flag=True):
        """Flip the admin flag, the only field that changes after creation."""
        with guarded(self.session, 'update admin flag'):
            user = self.session.get(User, user_id)
            if user is None:
                raise NotFound('User not found.')
            user.is_admin = flag
            self.session.commit()
            logger.info('Set is_admin=%s for user %s', flag, user.email)
        return user
