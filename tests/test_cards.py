from decimal import Decimal

import pytest

from fxwallet.models.card import Card
from fxwallet.services.card_service import freeze_card, unfreeze_card, update_card_status
from fxwallet.utils.exceptions import ServiceError
from conftest import headers_for


def _snapshot(card):
    return (card.type, card.last_four, card.expiry_date, card.spending_limit, card.current_spending)


def test_freeze_then_unfreeze_only_changes_status(app, user):
    card = Card.query.filter_by(user_id=user.id).one()
    assert card.status == "active"
    before = _snapshot(card)

    frozen = freeze_card(user.id, card.id)
    assert frozen.status == "frozen"
    assert _snapshot(frozen) == before

    active = unfreeze_card(user.id, card.id)
    assert active.status == "active"
    assert _snapshot(active) == before


@pytest.mark.parametrize("path", [("active", "blocked"), ("blocked", "frozen"), ("frozen", "active"), ("blocked", "active")])
def test_any_status_reachable(app, user, path):
    card = Card.query.filter_by(user_id=user.id).one()
    for status in path:
        assert update_card_status(user.id, card.id, status).status == status


def test_invalid_status_rejected(app, user):
    card = Card.query.filter_by(user_id=user.id).one()
    with pytest.raises(ServiceError):
        update_card_status(user.id, card.id, "stolen")


def test_cards_endpoint_masks_number(client, auth_headers):
    resp = client.get("/api/v1/cards", headers=auth_headers)
    assert resp.status_code == 200
    (card,) = resp.get_json()["cards"]
    assert card["number"] == "**** **** **** 4521"
    assert card["last_four"] == "4521"
    assert card["spending_limit"] == 5000.0
    assert card["spending_percent"] == pytest.approx(25.015)


def test_status_endpoints(client, auth_headers, user):
    card = Card.query.filter_by(user_id=user.id).one()

    resp = client.post(f"/api/v1/cards/{card.id}/freeze", headers=auth_headers)
    assert resp.get_json()["card"]["status"] == "frozen"

    resp = client.patch(f"/api/v1/cards/{card.id}/status", json={"status": "blocked"}, headers=auth_headers)
    assert resp.get_json()["card"]["status"] == "blocked"

    resp = client.patch(f"/api/v1/cards/{card.id}/status", json={"status": "lost"}, headers=auth_headers)
    assert resp.status_code == 422

    resp = client.post(f"/api/v1/cards/{card.id}/unfreeze", headers=auth_headers)
    assert resp.get_json()["card"]["status"] == "active"


def test_cannot_touch_another_users_card(client, user, make_user):
    card = Card.query.filter_by(user_id=user.id).one()
    intruder = make_user()

    resp = client.post(f"/api/v1/cards/{card.id}/freeze", headers=headers_for(intruder))

    assert resp.status_code == 404
    assert Card.query.get(card.id).status == "active"
