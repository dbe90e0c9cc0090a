import logging
import uuid
from datetime import timedelta
from decimal import Decimal

from flask import current_app
from flask_jwt_extended import create_access_token, create_refresh_token
from sqlalchemy.exc import SQLAlchemyError

from fxwallet.extensions import db
from fxwallet.models.card import Card
from fxwallet.models.contact import Contact
from fxwallet.models.user import User
from fxwallet.models.wallet import Wallet
from fxwallet.services.transaction_service import record_transaction
from fxwallet.utils.auth_utils import hash_password, check_password
from fxwallet.utils.catalog import (
    STARTER_WALLETS,
    STARTER_TRANSACTIONS,
    STARTER_CONTACTS,
    STARTER_CARD,
)
from fxwallet.utils.exceptions import ServiceError

logger = logging.getLogger(__name__)


def seed_starter_account(user):
    """Stage the wallets, sample history, contacts and card every new user gets.

    The sample transactions are history only and do not move the seeded
    balances.
    """
    for code, balance in STARTER_WALLETS.items():
        db.session.add(Wallet(
            id=f"wal_{uuid.uuid4().hex[:12]}",
            user_id=user.id,
            currency_code=code,
            balance=Decimal(balance),
        ))

    for tx in STARTER_TRANSACTIONS:
        record_transaction(
            user.id,
            tx["type"],
            Decimal(tx["amount"]),
            tx["currency"],
            tx["description"],
            status=tx["status"],
            adjust_balance=False,
        )

    for contact in STARTER_CONTACTS:
        db.session.add(Contact(user_id=user.id, **contact))

    db.session.add(Card(
        user_id=user.id,
        type=STARTER_CARD["type"],
        last_four=STARTER_CARD["last_four"],
        expiry_date=STARTER_CARD["expiry_date"],
        status=STARTER_CARD["status"],
        spending_limit=Decimal(STARTER_CARD["spending_limit"]),
        current_spending=Decimal(STARTER_CARD["current_spending"]),
    ))


def register_user(email, password, full_name=""):
    email = email.strip().lower()
    if User.query.filter_by(email=email).first():
        raise ServiceError(
            code="USER_EXISTS",
            message="User with that email already exists",
            details={"field": "email"},
            status=409,
        )

    user = User(
        email=email,
        password_hash=hash_password(password),
        full_name=full_name,
        display_currency=current_app.config["BASE_CURRENCY"],
    )
    try:
        db.session.add(user)
        db.session.flush()
        seed_starter_account(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("sign-up failed for %s", email)
        raise

    logger.info("registered user %s", user.id)
    return user


def authenticate_user(email, password):
    user = User.query.filter_by(email=(email or "").strip().lower()).first()
    if not user or not check_password(password, user.password_hash):
        raise ServiceError(code="AUTH_FAILED", message="Invalid credentials", status=401)
    return user


def generate_tokens_for_user(user):
    access = create_access_token(identity=user.id, expires_delta=timedelta(seconds=current_app.config.get("ACCESS_EXPIRES", 86400)))
    refresh = create_refresh_token(identity=user.id, expires_delta=timedelta(seconds=current_app.config.get("REFRESH_EXPIRES", 604800)))
    return access, refresh
