import pytest
from flask_jwt_extended import create_access_token

from fxwallet.main import create_app
from fxwallet.extensions import db as _db
from fxwallet.services.auth_service import register_user
from seed_currencies import seed_currencies


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        seed_currencies()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    counter = {"n": 0}

    def _make(email=None, password="secret123", full_name="Test Traveller"):
        counter["n"] += 1
        return register_user(email or f"traveller{counter['n']}@example.com", password, full_name)

    return _make


@pytest.fixture
def user(make_user):
    return make_user()


def headers_for(user):
    token = create_access_token(identity=user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(user):
    return headers_for(user)
