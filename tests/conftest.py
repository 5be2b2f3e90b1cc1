import pytest

from burganhome.app.clients.geocoder import AddressNotFound
from burganhome.app.clients.hosted_backend import AuthenticationError, SignedIn
from burganhome.app.clients.mailer import DeliveryResult
from burganhome.app.common.errors import CollaboratorError
from burganhome.app.config import Config
from burganhome.app.extensions import db
from burganhome.app.factory import create_app


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SITE_URL = "https://example.test"
    CONTACT_EMAIL = "contact@example.test"
    QUOTE_EMAIL = "quotes@example.test"
    BLOG_WEBHOOK_SECRET = "hook-secret"
    ENABLE_WEBHOOK_TEST = False
    WEBHOOK_URL = ""
    FALLBACK_WEBHOOK_URL = ""
    RATE_LIMIT_ENABLED = True
    RATE_LIMIT_DEFAULT = (10, 60)
    RATE_LIMIT_FORMS = (5, 300)


class FakeMailer:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    configured = True

    def send(self, to, subject, html, reply_to=None):
        if self.fail:
            return DeliveryResult(success=False, error="provider rejected the message")
        self.sent.append({"to": to, "subject": subject, "html": html, "reply_to": reply_to})
        return DeliveryResult(success=True, message_id=f"msg_{len(self.sent)}")


class FakeBackend:
    """Stands in for the hosted auth + storage client."""

    configured = True

    def __init__(self, fail_deletes=False, fail_upload_prefix=None):
        self.fail_deletes = fail_deletes
        self.fail_upload_prefix = fail_upload_prefix
        self.uploaded = []
        self.deleted = []
        self.users = {"owner@example.test": "correct-horse"}

    def sign_in(self, email, password):
        if self.users.get(email) != password:
            raise AuthenticationError("Invalid login credentials")
        return SignedIn(user_id="user-1", email=email, access_token="token-1", refresh_token="refresh-1")

    def upload_image(self, bucket, file_name, data, content_type):
        if self.fail_upload_prefix and file_name.startswith(self.fail_upload_prefix):
            raise CollaboratorError("bucket rejected the upload")
        self.uploaded.append((bucket, file_name, content_type))
        return f"https://storage.example.test/{bucket}/{file_name}"

    def delete_image(self, bucket, file_name):
        if self.fail_deletes:
            raise CollaboratorError("storage offline")
        self.deleted.append((bucket, file_name))


class FakeGeocoder:
    configured = True

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def geocode(self, address):
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        if address not in self.responses:
            raise AddressNotFound(address)
        return self.responses[address]


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    app.extensions["mailer"] = FakeMailer()
    app.extensions["hosted_backend"] = FakeBackend()
    app.extensions["geocoder"] = FakeGeocoder()

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def mailer(app):
    return app.extensions["mailer"]


@pytest.fixture()
def backend(app):
    return app.extensions["hosted_backend"]


@pytest.fixture()
def admin_client(client):
    with client.session_transaction() as sess:
        sess["admin"] = {"id": "user-1", "email": "owner@example.test", "access_token": "token-1"}
    return client
