"""
LifeLink - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask, current_app
from lifelink.extensions import db, login_manager
from lifelink.config import Config


def create_app(config_class=Config, notifier=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        notifier: Object with a `send(MailMessage)` method; defaults to an
            SMTP notifier built from the MAIL_* settings

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login_page'
    login_manager.login_message = None

    _init_services(app, notifier)

    # Register blueprints
    from lifelink.auth import auth_bp
    from lifelink.admin import admin_bp
    from lifelink.donors import donors_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(donors_bp)

    from lifelink.errors import register_error_handlers
    register_error_handlers(app)

    # Context processor for templates
    @app.context_processor
    def inject_current_year():
        from datetime import date
        return dict(current_year=date.today().year)

    # Principal loader for Flask-Login, backed by the session table
    @login_manager.request_loader
    def load_principal(request):
        from lifelink.guard import Principal
        services = current_app.extensions['lifelink']
        token = request.cookies.get(current_app.config['AUTH_COOKIE_NAME'])
        session_data = services.sessions.read(token)
        return Principal(session_data) if session_data else None

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(app.root_path, '..', 'instance'), exist_ok=True)
        from lifelink import models  # noqa: F401
        db.create_all()

    return app


def _init_services(app, notifier):
    """Build the store, session and notifier handles for this app."""
    from lifelink.services import (AccountService, DonorDirectory, Services,
                                   SessionManager, SmtpNotifier, UserStore)

    users = UserStore(db.session)
    sessions = SessionManager(db.session, lifetime=app.config['SESSION_LIFETIME'])
    app.extensions['lifelink'] = Services(
        users=users,
        sessions=sessions,
        directory=DonorDirectory(users),
        accounts=AccountService(users, sessions),
        notifier=notifier or SmtpNotifier.from_config(app.config),
    )

