import logging

from sqlalchemy.exc import SQLAlchemyError

from fxwallet.extensions import db
from fxwallet.services.contact_service import (
    build_contact,
    find_contact_by_email,
    get_contact,
    touch_contact,
)
from fxwallet.services.transaction_service import record_transaction
from fxwallet.services.wallet_service import get_active_currency, lock_wallet
from fxwallet.utils.exceptions import ServiceError
from fxwallet.utils.money import positive_amount

logger = logging.getLogger(__name__)


def _resolve_recipient(user_id, contact_id, name, email):
    if contact_id:
        contact = get_contact(user_id, contact_id)
        return contact, contact.name

    contact = find_contact_by_email(user_id, email)
    if contact:
        return contact, name or contact.name

    if not name:
        raise ServiceError(
            "VALIDATION_ERROR", "Recipient name is required", {"field": "recipient_name"}
        )
    return None, name.strip()


def send_money(user_id, amount, currency, contact_id=None, recipient_name=None,
               recipient_email=None, message=None):
    """Debit the sender's wallet for a transfer to someone outside the ledger.

    An unknown recipient given with both name and email is saved as a new
    contact in the same commit as the transfer.
    """
    amount = positive_amount(amount)
    currency = get_active_currency(currency)
    contact, name = _resolve_recipient(user_id, contact_id, recipient_name, recipient_email)

    try:
        wallet = lock_wallet(user_id, currency.code)
        if wallet.balance < amount:
            raise ServiceError(
                "INSUFFICIENT_FUNDS",
                "Not enough balance",
                {"available": str(wallet.balance), "currency": currency.code},
            )

        tx = record_transaction(
            user_id,
            "send",
            -amount,
            currency.code,
            f"Transfer to {name}",
            recipient=name,
        )

        created_contact = None
        if contact is not None:
            touch_contact(contact)
        elif recipient_email:
            created_contact = build_contact(user_id, name, recipient_email)
            touch_contact(created_contact)

        db.session.commit()
    except ServiceError:
        db.session.rollback()
        raise
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("send of %s %s failed for user %s", amount, currency.code, user_id)
        raise ServiceError(
            "SEND_FAILED", "Transfer could not be completed", {"currency": currency.code}, status=500
        ) from exc

    logger.info("user %s sent %s %s to %s", user_id, amount, currency.code, name)
    return {
        "transaction": tx,
        "contact": contact or created_contact,
        "contact_created": created_contact is not None,
        "balance": wallet.balance,
        "message": message.strip() if message else None,
    }
