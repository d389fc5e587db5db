import pytest

from lifelink import create_app
from lifelink.config import TestConfig
from lifelink.errors import NotificationFailed
from lifelink.extensions import db
from lifelink.services import hash_password


class RecordingNotifier:
    """Stands in for the SMTP notifier and keeps every message it was given."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, message):
        if self.fail:
            raise NotificationFailed('Failed to send email.')
        self.sent.append(message)


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def app(notifier):
    app = create_app(TestConfig, notifier=notifier)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture()
def services(app, app_ctx):
    return app.extensions['lifelink']


@pytest.fixture()
def create_user(app):
    """Insert a user directly through the store and return its id."""
    def _create(email, password='password1', blood_type='O+', city='Sadar',
                full_name='Test Donor', phone=None, is_admin=False):
        with app.app_context():
            users = app.extensions['lifelink'].users
            user = users.create(
                full_name=full_name,
                email=email,
                password_hash=hash_password(password),
                blood_type=blood_type,
                city=city,
                phone=phone,
            )
            if is_admin:
                users.set_admin(user.id, True)
            return user.id
    return _create


@pytest.fixture()
def login(client):
    def _login(email, password='password1'):
        return client.post('/api/login', json={'email': email, 'password': password})
    return _login


class BrokenSession:
    """SQLAlchemy session double whose every database call fails."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        from sqlalchemy.exc import OperationalError
        raise OperationalError('SELECT 1', {}, Exception('database is down'))

    add = commit = query = get = _fail

    def rollback(self):
        self.rolled_back = True


@pytest.fixture()
def broken_session():
    return BrokenSession()
