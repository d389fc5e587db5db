"""
Donors Blueprint
"""

from flask import Blueprint

donors_bp = Blueprint('donors', __name__)

from lifelink.donors import routes  # noqa: E402, F401
