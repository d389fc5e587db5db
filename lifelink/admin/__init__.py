"""
Admin Blueprint

Maintenance endpoints gated by `admin_required`.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from lifelink.admin import routes  # noqa: E402, F401
