"""
Models Package

Exports all models for easy importing.
"""

from lifelink.models.user import User, utcnow
from lifelink.models.session import UserSession

__all__ = ['User', 'UserSession', 'utcnow']
