"""
Database access helpers shared by the store services.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from lifelink.errors import BackendUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def guarded(session, action):
    """Roll back and raise BackendUnavailable on any database failure.

    IntegrityError is a SQLAlchemyError too, so callers that need to react to
    constraint violations catch it inside the block.
    """
    try:
        yield session
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception('Database error while trying to %s', action)
        raise BackendUnavailable(f'Could not {action}.') from e
