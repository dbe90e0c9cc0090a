from decimal import Decimal
from urllib.parse import quote

import pytest

from fxwallet.services.wallet_service import build_portfolio, load_currency_view

STARTER_TOTAL = float(
    Decimal("2450.75")
    + Decimal("890.30") * Decimal("1.17647059")
    + Decimal("320.50") * Decimal("1.36986301")
)


def test_currency_view_joins_balances(app, user):
    view = {c["code"]: c for c in load_currency_view(user.id)}

    assert len(view) == 10
    assert view["USD"]["balance"] == Decimal("2450.75")
    assert view["JPY"]["balance"] == Decimal("0.00")
    assert view["EUR"]["rate"] == Decimal("1.17647059")


def test_portfolio_values_in_base_and_sorts(app, user):
    portfolio = build_portfolio(user.id)

    expected = (
        Decimal("2450.75")
        + Decimal("890.30") * Decimal("1.17647059")
        + Decimal("320.50") * Decimal("1.36986301")
    )
    assert portfolio["total_base"] == expected
    assert portfolio["display_currency"] == "USD"
    assert [h["code"] for h in portfolio["holdings"][:3]] == ["USD", "EUR", "GBP"]


def test_home_endpoint(client, auth_headers):
    resp = client.get("/api/v1/home", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert [w["code"] for w in body["wallets"]] == ["USD", "EUR", "GBP"]
    assert len(body["recent_transactions"]) == 2
    assert body["total_balance"] == pytest.approx(STARTER_TOTAL, abs=0.01)


def test_hidden_balances(client, auth_headers):
    resp = client.patch("/api/v1/settings", json={"hide_balances": True}, headers=auth_headers)
    assert resp.status_code == 200

    body = client.get("/api/v1/wallets", headers=auth_headers).get_json()
    assert body["total_base"] is None
    assert all(w["balance"] is None for w in body["wallets"])


def test_display_currency_setting(client, auth_headers):
    resp = client.patch("/api/v1/settings", json={"display_currency": "eur"}, headers=auth_headers)
    assert resp.get_json()["settings"]["display_currency"] == "EUR"

    body = client.get("/api/v1/home", headers=auth_headers).get_json()
    assert body["display_currency"] == "EUR"
    assert body["total_balance"] == pytest.approx(STARTER_TOTAL / 1.17647059, abs=0.01)

    resp = client.patch("/api/v1/settings", json={"display_currency": "XYZ"}, headers=auth_headers)
    assert resp.status_code == 400


def test_contacts_endpoints(client, auth_headers):
    resp = client.get("/api/v1/contacts?q=sarah", headers=auth_headers)
    assert [c["avatar"] for c in resp.get_json()["contacts"]] == ["SJ"]

    resp = client.post(
        "/api/v1/contacts", json={"name": "leo park", "email": "leo@example.com"}, headers=auth_headers
    )
    assert resp.status_code == 201
    assert resp.get_json()["contact"]["avatar"] == "LP"

    resp = client.post(
        "/api/v1/contacts", json={"name": "Leo", "email": "LEO@example.com"}, headers=auth_headers
    )
    assert resp.status_code == 409


@pytest.mark.parametrize("wildcard", ["%", "_"])
def test_contact_search_treats_wildcards_literally(client, auth_headers, wildcard):
    resp = client.get(f"/api/v1/contacts?q={quote(wildcard)}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["contacts"] == []
