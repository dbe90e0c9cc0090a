import logging
import uuid
from collections import OrderedDict
from datetime import datetime
from decimal import Decimal

from sqlalchemy import or_, func
from sqlalchemy.exc import SQLAlchemyError

from fxwallet.extensions import db
from fxwallet.models.wallet_transaction import (
    WalletTransaction,
    TRANSACTION_TYPES,
    TRANSACTION_STATUSES,
)
from fxwallet.services.wallet_service import adjust_wallet_balance, get_active_currency
from fxwallet.utils.exceptions import ServiceError
from fxwallet.utils.money import to_decimal, to_cents, CENT
from fxwallet.utils.search import contains_pattern

logger = logging.getLogger(__name__)


def gen_tx_id():
    return f"tx_{uuid.uuid4().hex[:12]}"


def record_transaction(
    user_id,
    tx_type,
    amount,
    currency,
    description,
    status="completed",
    location=None,
    recipient=None,
    category=None,
    adjust_balance=True,
):
    """Append a ledger entry and apply it to the matching wallet.

    Nothing is committed here; the caller owns the database transaction so
    several entries can land atomically.
    """
    if tx_type not in TRANSACTION_TYPES:
        raise ServiceError("VALIDATION_ERROR", f"Unknown transaction type {tx_type}", {"field": "type"})
    if status not in TRANSACTION_STATUSES:
        raise ServiceError("VALIDATION_ERROR", f"Unknown status {status}", {"field": "status"})

    amount = to_cents(amount)
    tx = WalletTransaction(
        id=gen_tx_id(),
        user_id=user_id,
        type=tx_type,
        amount=amount,
        currency=currency,
        description=description,
        location=location,
        recipient=recipient,
        category=category,
        status=status,
        created_at=datetime.utcnow(),
    )
    db.session.add(tx)

    if adjust_balance:
        adjust_wallet_balance(user_id, currency, amount)
    return tx


def add_transaction(user_id, data):
    currency = get_active_currency(data["currency"])
    amount = to_decimal(data["amount"])
    if amount == 0:
        raise ServiceError("INVALID_AMOUNT", "amount must not be zero", {"field": "amount"})

    try:
        tx = record_transaction(
            user_id,
            data["type"],
            amount,
            currency.code,
            data["description"],
            status=data.get("status", "completed"),
            location=data.get("location"),
            recipient=data.get("recipient"),
            category=data.get("category"),
        )
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("failed to add %s transaction for user %s", data.get("type"), user_id)
        raise

    logger.info("transaction %s recorded for user %s", tx.id, user_id)
    return tx


def _month_bounds(month):
    try:
        start = datetime.strptime(month, "%Y-%m")
    except ValueError:
        raise ServiceError("VALIDATION_ERROR", "month must be formatted YYYY-MM", {"field": "month"})
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def filter_transactions(user_id, tx_type=None, search=None, month=None):
    q = WalletTransaction.query.filter_by(user_id=user_id)

    if tx_type and tx_type != "all":
        if tx_type not in TRANSACTION_TYPES:
            raise ServiceError("VALIDATION_ERROR", f"Unknown transaction type {tx_type}", {"field": "type"})
        q = q.filter(WalletTransaction.type == tx_type)

    if search:
        pattern = contains_pattern(search)
        q = q.filter(
            or_(
                WalletTransaction.description.ilike(pattern, escape="\\"),
                WalletTransaction.location.ilike(pattern, escape="\\"),
            )
        )

    if month:
        start, end = _month_bounds(month)
        q = q.filter(WalletTransaction.created_at >= start, WalletTransaction.created_at < end)

    return q.order_by(WalletTransaction.created_at.desc(), WalletTransaction.id.desc())


def summarize(query):
    spent = (
        query.order_by(None)
        .with_entities(func.coalesce(func.sum(WalletTransaction.amount), 0))
        .filter(WalletTransaction.amount < 0)
        .scalar()
    )
    received = (
        query.order_by(None)
        .with_entities(func.coalesce(func.sum(WalletTransaction.amount), 0))
        .filter(WalletTransaction.amount > 0)
        .scalar()
    )
    return {
        "total_spent": abs(Decimal(str(spent))).quantize(CENT),
        "total_received": Decimal(str(received)).quantize(CENT),
    }


def group_by_day(transactions):
    groups = OrderedDict()
    for tx in transactions:
        groups.setdefault(tx.created_at.date().isoformat(), []).append(tx)
    return groups


def recent_transactions(user_id, limit=5):
    return (
        WalletTransaction.query
        .filter_by(user_id=user_id)
        .order_by(WalletTransaction.created_at.desc(), WalletTransaction.id.desc())
        .limit(limit)
        .all()
    )
