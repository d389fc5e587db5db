"""
Admin Routes
"""

import logging

from flask import jsonify

from lifelink.admin import admin_bp
from lifelink.errors import BackendUnavailable
from lifelink.guard import admin_required
from lifelink.services import get_services

logger = logging.getLogger(__name__)


@admin_bp.route('/purge-sessions', methods=['POST'])
@admin_required
def purge_sessions():
    """Delete expired sessions from the session table."""
    try:
        purged = get_services().sessions.purge_expired()
    except BackendUnavailable:
        logger.exception('Session purge failed')
        return jsonify({'error': 'Server error.'}), 500
    return jsonify({'success': True, 'purged': purged})
