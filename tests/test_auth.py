from decimal import Decimal

from fxwallet.models.card import Card
from fxwallet.models.contact import Contact
from fxwallet.models.wallet import Wallet
from fxwallet.models.wallet_transaction import WalletTransaction
from fxwallet.services.wallet_service import get_wallet_balance


def test_register_seeds_starter_account(client):
    resp = client.post(
        "/api/v1/auth/register",
        json={"email": "New@Example.com", "password": "secret123", "full_name": "New User"},
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["access_token"] and body["refresh_token"]
    uid = body["user"]["id"]
    assert body["user"]["email"] == "new@example.com"

    assert Wallet.query.filter_by(user_id=uid).count() == 3
    assert get_wallet_balance(uid, "USD") == Decimal("2450.75")
    assert get_wallet_balance(uid, "EUR") == Decimal("890.30")
    assert get_wallet_balance(uid, "GBP") == Decimal("320.50")
    assert WalletTransaction.query.filter_by(user_id=uid).count() == 2
    assert Contact.query.filter_by(user_id=uid).count() == 2
    card = Card.query.filter_by(user_id=uid).one()
    assert (card.last_four, card.expiry_date, card.status) == ("4521", "12/27", "active")


def test_duplicate_email_conflicts(client, user):
    resp = client.post(
        "/api/v1/auth/register", json={"email": user.email, "password": "secret123"}
    )
    assert resp.status_code == 409
    assert resp.get_json()["error"]["code"] == "USER_EXISTS"


def test_register_validates_payload(client):
    resp = client.post("/api/v1/auth/register", json={"email": "bad", "password": "1"})
    assert resp.status_code == 422
    assert set(resp.get_json()["error"]["details"]) == {"email", "password"}


def test_login_and_me(client, user):
    resp = client.post("/api/v1/auth/login", json={"email": user.email, "password": "secret123"})
    assert resp.status_code == 200
    token = resp.get_json()["access_token"]

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.get_json()["email"] == user.email


def test_login_wrong_password(client, user):
    resp = client.post("/api/v1/auth/login", json={"email": user.email, "password": "wrong"})
    assert resp.status_code == 401
    assert resp.get_json()["error"]["code"] == "AUTH_FAILED"


def test_refresh_issues_access_token(client, user):
    tokens = client.post(
        "/api/v1/auth/login", json={"email": user.email, "password": "secret123"}
    ).get_json()

    resp = client.post(
        "/api/v1/auth/refresh", headers={"Authorization": f"Bearer {tokens['refresh_token']}"}
    )
    assert resp.status_code == 200
    assert resp.get_json()["access_token"]


def test_me_requires_token(client):
    resp = client.get("/api/v1/auth/me")
    assert resp.status_code == 401
    assert resp.get_json()["error"]["code"] == "UNAUTHORIZED"
