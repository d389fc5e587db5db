"""
Services Package

Exports all services for easy importing.
"""

from dataclasses import dataclass

from flask import current_app

from lifelink.services.accounts import AccountService, validate_registration
from lifelink.services.credentials import hash_password, verify_password
from lifelink.services.directory import DonorDirectory
from lifelink.services.notifier import DonationRequest, MailMessage, SmtpNotifier, build_request_message
from lifelink.services.sessions import SessionData, SessionManager
from lifelink.services.users import UserStore


@dataclass
class Services:
    """Handles built by the application factory, one set per app."""
    users: UserStore
    sessions: SessionManager
    directory: DonorDirectory
    accounts: AccountService
    notifier: object


def get_services():
    return current_app.extensions['lifelink']


__all__ = [
    'AccountService',
    'DonationRequest',
    'DonorDirectory',
    'MailMessage',
    'Services',
    'SessionData',
    'SessionManager',
    'SmtpNotifier',
    'UserStore',
    'build_request_message',
    'get_services',
    'hash_password',
    'validate_registration',
    'verify_password',
]
