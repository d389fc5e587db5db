"""
Auth Routes

Registration, login and logout. Login issues a server-side session whose
token is handed to the browser as an HTTP-only cookie.
"""

import logging

from flask import jsonify, redirect, render_template, url_for
from flask_login import current_user

from lifelink.auth import auth_bp
from lifelink.constants import BLOOD_TYPES, NAGPUR_AREAS
from lifelink.errors import BackendUnavailable, ValidationError
from lifelink.services import get_services
from lifelink.utils import clear_session_cookie, request_data, session_token, set_session_cookie

logger = logging.getLogger(__name__)


@auth_bp.route('/register')
def register_page():
    return render_template('register.html', title='Register',
                           blood_types=BLOOD_TYPES, areas=NAGPUR_AREAS)


@auth_bp.route('/api/register', methods=['POST'])
def register():
    """Create an account; all field errors are reported together."""
    try:
        get_services().accounts.register(request_data())
    except ValidationError as e:
        return jsonify({'errors': e.errors}), 400
    except BackendUnavailable:
        logger.exception('Registration failed')
        return jsonify({'errors': {'general': 'Server error.'}}), 500
    return jsonify({'success': True})


@auth_bp.route('/login')
def login_page():
    if current_user.is_authenticated:
        return redirect(url_for('donors.index'))
    return render_template('login.html', title='Login')


@auth_bp.route('/api/login', methods=['POST'])
def login():
    data = request_data()
    try:
        token = get_services().accounts.login(data.get('email'), data.get('password'))
    except ValidationError as e:
        return jsonify({'errors': e.errors}), 400
    except BackendUnavailable:
        logger.exception('Login failed')
        return jsonify({'errors': {'general': 'Internal server error.'}}), 500
    return set_session_cookie(jsonify({'success': True}), token)


@auth_bp.route('/logout')
def logout():
    """Destroy the session; the cookie is cleared even if that fails."""
    try:
        get_services().accounts.logout(session_token())
    except BackendUnavailable:
        logger.exception('Logout failed')
        return clear_session_cookie(jsonify({'error': 'Failed to logout'})), 500
    return clear_session_cookie(redirect(url_for('auth.login_page')))
