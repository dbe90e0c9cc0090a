import logging
from datetime import datetime

from fxwallet.extensions import db
from fxwallet.models.card import Card, CARD_STATUSES
from fxwallet.utils.exceptions import ServiceError, NotFoundError

logger = logging.getLogger(__name__)


def list_cards(user_id):
    return Card.query.filter_by(user_id=user_id).order_by(Card.created_at).all()


def get_card(user_id, card_id):
    card = Card.query.filter_by(id=card_id, user_id=user_id).first()
    if not card:
        raise NotFoundError("Card", card_id)
    return card


def update_card_status(user_id, card_id, status):
    if status not in CARD_STATUSES:
        raise ServiceError(
            "VALIDATION_ERROR",
            f"Invalid card status {status}",
            {"field": "status", "allowed": list(CARD_STATUSES)},
        )
    card = get_card(user_id, card_id)
    previous = card.status
    card.status = status
    card.updated_at = datetime.utcnow()
    db.session.commit()

    logger.info("card %s status %s -> %s", card.id, previous, status)
    return card


def freeze_card(user_id, card_id):
    return update_card_status(user_id, card_id, "frozen")


def unfreeze_card(user_id, card_id):
    return update_card_status(user_id, card_id, "active")
