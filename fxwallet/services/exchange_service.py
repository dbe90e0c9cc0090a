"""Currency exchange between two of a user's wallets.

Every stored rate is the value of one unit in the base currency, so the
cross rate between any two currencies is the ratio of their stored rates.
The debit leg is the requested amount (already exact to the cent); the
credit leg is rounded toward zero, which keeps any round trip from paying
out more than it took in.
"""
import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from fxwallet.extensions import db
from fxwallet.services.transaction_service import record_transaction
from fxwallet.services.wallet_service import (
    get_active_currency,
    lock_wallet,
    load_currency_view,
)
from fxwallet.utils.exceptions import ServiceError
from fxwallet.utils.money import positive_amount, round_down

logger = logging.getLogger(__name__)


def cross_rate(from_rate, to_rate):
    from_rate, to_rate = Decimal(from_rate), Decimal(to_rate)
    if from_rate <= 0 or to_rate <= 0:
        raise ServiceError("INVALID_RATE", "Exchange rates must be positive")
    return from_rate / to_rate


def convert(amount, rate):
    return round_down(Decimal(amount) * Decimal(rate))


def exchange_description(from_code, to_code):
    return f"{from_code} → {to_code} Exchange"


def quote_exchange(from_code, to_code, amount):
    if (from_code or "").upper() == (to_code or "").upper():
        raise ServiceError(
            "SAME_CURRENCY", "Choose two different currencies", {"fields": ["from", "to"]}
        )
    amount = positive_amount(amount)
    source = get_active_currency(from_code)
    target = get_active_currency(to_code)

    rate = cross_rate(source.rate, target.rate)
    converted = convert(amount, rate)
    return {
        "from": source.code,
        "to": target.code,
        "amount": amount,
        "rate": rate,
        "inverse_rate": cross_rate(target.rate, source.rate),
        "converted": converted,
    }


def execute_exchange(user_id, from_code, to_code, amount):
    """Move ``amount`` of one currency into another for a single user.

    The target credit is appended before the source debit. Both ledger rows
    and both balance changes commit together or not at all.
    """
    quote = quote_exchange(from_code, to_code, amount)
    if quote["converted"] <= 0:
        raise ServiceError(
            "AMOUNT_TOO_SMALL",
            "Amount is too small to convert",
            {"amount": str(quote["amount"])},
        )

    description = exchange_description(quote["from"], quote["to"])
    try:
        source_wallet = lock_wallet(user_id, quote["from"])
        if source_wallet.balance < quote["amount"]:
            raise ServiceError(
                "INSUFFICIENT_FUNDS",
                "Not enough balance",
                {"available": str(source_wallet.balance), "currency": quote["from"]},
            )

        credit = record_transaction(
            user_id, "exchange", quote["converted"], quote["to"], description
        )
        debit = record_transaction(
            user_id, "exchange", -quote["amount"], quote["from"], description
        )
        db.session.commit()
    except ServiceError:
        db.session.rollback()
        raise
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception(
            "exchange %s -> %s failed for user %s", quote["from"], quote["to"], user_id
        )
        raise ServiceError(
            "EXCHANGE_FAILED",
            "Exchange could not be completed",
            {"from": quote["from"], "to": quote["to"]},
            status=500,
        ) from exc

    logger.info(
        "user %s exchanged %s %s for %s %s",
        user_id, quote["amount"], quote["from"], quote["converted"], quote["to"],
    )
    return {
        "quote": quote,
        "transactions": [credit, debit],
        "currencies": load_currency_view(user_id),
    }
