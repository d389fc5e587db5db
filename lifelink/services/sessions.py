"""
Session Manager

Server-side sessions stored in `user_sessions`. The browser only ever holds
the opaque token; identity and role are cached in the row at login time.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from lifelink.models import UserSession, utcnow
from lifelink.services.storage import guarded

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(days=30)


@dataclass(frozen=True)
class SessionData:
    token: str
    user_id: int
    user_email: str
    is_admin: bool
    expires_at: datetime


class SessionManager:
    """Issue, read and destroy sessions through an injected SQLAlchemy session."""

    def __init__(self, session, lifetime=DEFAULT_LIFETIME, clock=utcnow):
        self.session = session
        self.lifetime = lifetime
        self.clock = clock

    def create(self, user_id, user_email, is_admin):
        """Store a new session and return its token."""
        now = self.clock()
        token = secrets.token_urlsafe(32)
        record = UserSession(
            sid=token,
            user_id=user_id,
            user_email=user_email,
            is_admin=bool(is_admin),
            created_at=now,
            expires_at=now + self.lifetime,
        )
        with guarded(self.session, 'create session'):
            self.session.add(record)
            self.session.commit()
        return token

    def read(self, token):
        """Session data for `token`, or None when unknown or expired."""
        if not token:
            return None
        with guarded(self.session, 'read session'):
            record = self.session.get(UserSession, token)
            if record is None or record.expires_at <= self.clock():
                return None
            return SessionData(
                token=record.sid,
                user_id=record.user_id,
                user_email=record.user_email,
                is_admin=bool(record.is_admin),
                expires_at=record.expires_at,
            )

    def destroy(self, token):
        if not token:
            return
        with guarded(self.session, 'destroy session'):
            self.session.query(UserSession).filter(UserSession.sid == token).delete()
            self.session.commit()

    def destroy_for_user(self, user_id):
        """Drop every session of a user, e.g. after the account is deleted."""
        with guarded(self.session, 'destroy user sessions'):
            count = self.session.query(UserSession).filter(UserSession.user_id == user_id).delete()
            self.session.commit()
        return count

    def purge_expired(self):
        with guarded(self.session, 'purge expired sessions'):
            count = self.session.query(UserSession)\
                .filter(UserSession.expires_at <= self.clock()).delete()
            self.session.commit()
        if count:
            logger.info('Purged %d expired sessions', count)
        return count
