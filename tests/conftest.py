import os

# Set testing environment variable before the app is imported
os.environ["TESTING"] = "1"

import mongomock
import pytest
from fastapi.testclient import TestClient

from doctors_portal.api.deps import get_identity_verifier
from doctors_portal.core.config import Settings
from doctors_portal.core.database import get_db
from doctors_portal.core.security import Identity
from doctors_portal.main import create_app
from doctors_portal.services.payment_service import get_payment_gateway


class FakeIdentityVerifier:
    """Maps known tokens to identities; everything else is anonymous."""

    def __init__(self):
        self.tokens = {}
        self.calls = []

    def add(self, token, email, uid="uid-1"):
        self.tokens[token] = Identity(uid=uid, email=email)

    def verify(self, id_token):
        self.calls.append(id_token)
        return self.tokens.get(id_token)


class FakePaymentGateway:
    def __init__(self):
        self.amounts = []

    def create_payment_intent(self, amount):
        self.amounts.append(amount)
        return f"pi_{len(self.amounts)}_secret_test"


def build_app(db, verifier, gateway, **overrides):
    app = create_app(Settings(TESTING=True, **overrides))
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    return app


@pytest.fixture
def db():
    return mongomock.MongoClient()["doctors_portal_test"]

@pytest.fixture
def verifier():
    return FakeIdentityVerifier()

@pytest.fixture
def gateway():
    return FakePaymentGateway()

@pytest.fixture
def app(db, verifier, gateway):
    return build_app(db, verifier, gateway)

@pytest.fixture
def client(app):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
