"""
Error taxonomy and global HTTP error handlers.
"""
import logging

from flask import jsonify, render_template, request

logger = logging.getLogger(__name__)


class LifeLinkError(Exception):
    """Base class for errors raised by LifeLink services."""

    def __init__(self, message=''):
        super().__init__(message)
        self.message = message


class ValidationError(LifeLinkError):
    """Client-correctable input errors, keyed by field name."""

    def __init__(self, errors):
        super().__init__('; '.join(f'{k}: {v}' for k, v in errors.items()))
        self.errors = dict(errors)


class DuplicateEmail(ValidationError):
    """The email address already belongs to an account."""

    def __init__(self, errors=None):
        merged = dict(errors or {})
        merged['email'] = 'Email already registered.'
        super().__init__(merged)


class NotFound(LifeLinkError):
    pass


class Forbidden(LifeLinkError):
    pass


class BackendUnavailable(LifeLinkError, OSError):
    """The database or the mail transport could not be reached."""


class NotificationFailed(BackendUnavailable):
    pass


def _wants_json():
    return request.path.startswith('/api/') or request.is_json


def register_error_handlers(app):
    """Install handlers for errors that escape a view.

    API routes and JSON requests get a JSON body; pages get an HTML page.
    """

    @app.errorhandler(403)
    def forbidden(err):
        return jsonify({'error': 'Forbidden.'}), 403

    @app.errorhandler(404)
    def not_found(err):
        if _wants_json():
            return jsonify({'error': 'Page not found.'}), 404
        return render_template('404.html', title='Page Not Found'), 404

    @app.errorhandler(BackendUnavailable)
    def backend_unavailable(err):
        logger.error('Backend unavailable: %s', err)
        return _server_error()

    @app.errorhandler(500)
    def internal(err):
        logger.error('Unhandled error: %s', err)
        return _server_error()


def _server_error():
    if _wants_json():
        return jsonify({'error': 'Server error.'}), 500
    return render_template('500.html', title='Server Error'), 500
