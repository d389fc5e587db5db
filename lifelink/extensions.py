"""
Flask Extensions

Authentication state lives in the server-side session table; Flask-Login is
only used to resolve the current principal from the session cookie.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Resolves `current_user` from the LifeLink session cookie
login_manager = LoginManager()
