"""
Request and cookie helpers shared by the blueprints.
"""

from flask import current_app, request


def request_data():
    """Body of the current request, JSON or form-encoded."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def session_token():
    return request.cookies.get(current_app.config['AUTH_COOKIE_NAME'])


def set_session_cookie(response, token):
    config = current_app.config
    response.set_cookie(
        config['AUTH_COOKIE_NAME'],
        token,
        max_age=int(config['SESSION_LIFETIME'].total_seconds()),
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite='Lax',
    )
    return response


def clear_session_cookie(response):
    config = current_app.config
    response.delete_cookie(
        config['AUTH_COOKIE_NAME'],
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite='Lax',
    )
    return response
