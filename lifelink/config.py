"""
Configuration settings for the LifeLink blood donor registry
"""
import os
from datetime import timedelta


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask application configuration"""

    # Flask secret key (flash messages, Flask-Login internals)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    PRODUCTION = (os.environ.get('APP_ENV') or os.environ.get('FLASK_ENV')) == 'production'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'lifelink.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions
    SESSION_LIFETIME = timedelta(days=30)
    AUTH_COOKIE_NAME = os.environ.get('AUTH_COOKIE_NAME') or 'lifelink_sid'
    AUTH_COOKIE_SECURE = _env_flag('AUTH_COOKIE_SECURE', PRODUCTION)

    # Outbound mail for donation requests
    MAIL_SERVER = os.environ.get('MAIL_SERVER') or 'smtp.gmail.com'
    MAIL_PORT = int(os.environ.get('MAIL_PORT') or 587)
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS', True)
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME') or os.environ.get('EMAIL_USER')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD') or os.environ.get('EMAIL_PASS')
    MAIL_SENDER_NAME = os.environ.get('MAIL_SENDER_NAME') or 'LifeLink'
    MAIL_TIMEOUT = 10

    # Admin seed account (scripts/make_admin.py)
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL') or 'admin@lifelink.org'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'change-me-admin'
    ADMIN_NAME = os.environ.get('ADMIN_NAME') or 'LifeLink Admin'
    ADMIN_BLOOD_TYPE = os.environ.get('ADMIN_BLOOD_TYPE') or 'O+'
    ADMIN_CITY = os.environ.get('ADMIN_CITY') or 'Sadar'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTH_COOKIE_SECURE = False
    MAIL_USERNAME = 'noreply@lifelink.test'
