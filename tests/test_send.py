import json
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from fxwallet.extensions import db
from fxwallet.models.contact import Contact
from fxwallet.models.wallet_transaction import WalletTransaction
from fxwallet.services.transfer_service import send_money
from fxwallet.services.wallet_service import get_wallet_balance
from fxwallet.utils.exceptions import ServiceError
from fxwallet.utils.scan import parse_scan_payload


def test_send_to_new_recipient_debits_and_saves_contact(app, user):
    result = send_money(
        user.id, "50.25", "EUR",
        recipient_name="Ana Lima", recipient_email="ana@example.com",
    )

    tx = result["transaction"]
    assert tx.type == "send"
    assert tx.amount == Decimal("-50.25")
    assert tx.recipient == "Ana Lima"
    assert tx.description == "Transfer to Ana Lima"
    assert get_wallet_balance(user.id, "EUR") == Decimal("840.05")

    assert result["contact_created"] is True
    contact = Contact.query.filter_by(user_id=user.id, email="ana@example.com").one()
    assert contact.avatar == "AL"
    assert contact.last_transaction_date is not None


def test_send_to_existing_contact_does_not_duplicate(app, user):
    sarah = Contact.query.filter_by(user_id=user.id, email="sarah.j@email.com").one()

    result = send_money(user.id, "10", "USD", contact_id=sarah.id)

    assert result["contact_created"] is False
    assert result["transaction"].recipient == "Sarah Johnson"
    assert Contact.query.filter_by(user_id=user.id).count() == 2


def test_send_without_email_skips_contact(app, user):
    result = send_money(user.id, "5", "USD", recipient_name="Cash Friend")

    assert result["contact"] is None
    assert Contact.query.filter_by(user_id=user.id).count() == 2


def test_send_creates_no_reciprocal_credit(app, user):
    before = WalletTransaction.query.filter_by(user_id=user.id).count()
    send_money(user.id, "5", "USD", recipient_name="Cash Friend")
    assert WalletTransaction.query.filter_by(user_id=user.id).count() == before + 1


def test_send_more_than_balance_is_rejected(app, user):
    with pytest.raises(ServiceError) as exc:
        send_money(user.id, "320.51", "GBP", recipient_name="X", recipient_email="x@example.com")

    assert exc.value.code == "INSUFFICIENT_FUNDS"
    assert get_wallet_balance(user.id, "GBP") == Decimal("320.50")
    assert Contact.query.filter_by(user_id=user.id, email="x@example.com").count() == 0


def test_send_endpoint(client, auth_headers):
    resp = client.post(
        "/api/v1/send",
        json={
            "recipient_name": "Mike Chen",
            "recipient_email": "mike.chen@email.com",
            "amount": 20,
            "currency": "USD",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["contact_created"] is False
    assert body["balance"] == 2430.75
    assert body["transaction"]["amount"] == -20.0


def test_send_endpoint_rejects_bad_email(client, auth_headers):
    resp = client.post(
        "/api/v1/send",
        json={"recipient_name": "A", "recipient_email": "nope", "amount": 1, "currency": "USD"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


def test_scan_json_payload():
    payload = json.dumps({"name": "Sarah Johnson", "email": "sarah.j@email.com", "amount": 25, "currency": "eur"})
    assert parse_scan_payload(payload) == {
        "name": "Sarah Johnson",
        "email": "sarah.j@email.com",
        "amount": "25",
        "currency": "EUR",
    }


def test_scan_raw_email():
    assert parse_scan_payload("  mike.chen@email.com ") == {
        "name": None,
        "email": "mike.chen@email.com",
        "amount": None,
        "currency": None,
    }


@pytest.mark.parametrize("payload", ["", "hello world", '{"name": "No Email"}'])
def test_scan_rejects_unusable_payloads(payload):
    with pytest.raises(ServiceError) as exc:
        parse_scan_payload(payload)
    assert exc.value.code == "INVALID_SCAN"


def test_scan_endpoint(client, auth_headers):
    resp = client.post("/api/v1/send/scan", json={"payload": "pay@example.com"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["recipient"]["email"] == "pay@example.com"

    resp = client.post("/api/v1/send/scan", json={"payload": "garbage"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "INVALID_SCAN"


def test_failed_commit_rolls_back_transfer_and_new_contact(app, user, monkeypatch):
    before = WalletTransaction.query.filter_by(user_id=user.id).count()

    def flush_then_fail():
        db.session.flush()
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(db.session, "commit", flush_then_fail)

    with pytest.raises(ServiceError) as exc:
        send_money(
            user.id, "50.25", "EUR",
            recipient_name="Ana Lima", recipient_email="ana@example.com",
        )

    assert exc.value.code == "SEND_FAILED"
    assert exc.value.status == 500
    assert WalletTransaction.query.filter_by(user_id=user.id).count() == before
    assert get_wallet_balance(user.id, "EUR") == Decimal("890.30")
    assert Contact.query.filter_by(user_id=user.id, email="ana@example.com").count() == 0


def test_failed_commit_returns_error_envelope(client, auth_headers, monkeypatch):
    def fail_commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(db.session, "commit", fail_commit)

    resp = client.post(
        "/api/v1/send",
        json={"recipient_name": "Cash Friend", "amount": 5, "currency": "USD"},
        headers=auth_headers,
    )
    assert resp.status_code == 500
    assert resp.get_json()["error"]["code"] == "SEND_FAILED"


def test_send_rejects_oversized_amount(app, user):
    with pytest.raises(ServiceError) as exc:
        send_money(user.id, "1e30", "USD", recipient_name="Cash Friend")
    assert exc.value.code == "INVALID_AMOUNT"


def test_send_endpoint_echoes_message(client, auth_headers):
    resp = client.post(
        "/api/v1/send",
        json={
            "recipient_name": "Cash Friend",
            "amount": "12.50",
            "currency": "USD",
            "message": "  Dinner in Lisbon ",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Dinner in Lisbon"
    assert body["transaction"]["description"] == "Transfer to Cash Friend"

    resp = client.post(
        "/api/v1/send",
        json={"recipient_name": "Cash Friend", "amount": 1, "currency": "USD", "message": "x" * 256},
        headers=auth_headers,
    )
    assert resp.status_code == 422
