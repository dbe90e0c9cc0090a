import logging
import uuid
from decimal import Decimal

from flask import current_app

from fxwallet.extensions import db
from fxwallet.models.currency import Currency
from fxwallet.models.wallet import Wallet
from fxwallet.models.user import User
from fxwallet.utils.exceptions import ServiceError, NotFoundError

logger = logging.getLogger(__name__)


def gen_wallet_id():
    return f"wal_{uuid.uuid4().hex[:12]}"


def get_active_currency(code):
    currency = Currency.query.filter_by(code=(code or "").upper(), is_active=True).first()
    if not currency:
        raise ServiceError(
            "UNKNOWN_CURRENCY",
            f"Currency {code} is not available",
            {"currency": code},
        )
    return currency


def lock_wallet(user_id, currency_code):
    """Fetch the wallet row with a row lock held until the session commits.

    The wallet is created with a zero balance when the user has never held
    the currency.
    """
    wallet = (
        Wallet.query
        .filter_by(user_id=user_id, currency_code=currency_code)
        .with_for_update()
        .first()
    )
    if not wallet:
        wallet = Wallet(
            id=gen_wallet_id(),
            user_id=user_id,
            currency_code=currency_code,
            balance=Decimal("0.00"),
        )
        db.session.add(wallet)
        db.session.flush()
    return wallet


def adjust_wallet_balance(user_id, currency_code, amount):
    """Add a signed amount to a wallet balance inside the caller's transaction."""
    wallet = lock_wallet(user_id, currency_code)
    wallet.balance = Decimal(wallet.balance or 0) + Decimal(amount)
    logger.debug(
        "wallet %s %s adjusted by %s to %s",
        wallet.id, currency_code, amount, wallet.balance,
    )
    return wallet


def get_wallet_balance(user_id, currency_code):
    wallet = Wallet.query.filter_by(user_id=user_id, currency_code=currency_code).first()
    if not wallet:
        return Decimal("0.00")
    return Decimal(wallet.balance)


def load_currency_view(user_id):
    """Active currencies with the user's balance joined on (0 when no wallet)."""
    rows = (
        db.session.query(Currency, Wallet.balance)
        .outerjoin(
            Wallet,
            (Wallet.currency_code == Currency.code) & (Wallet.user_id == user_id),
        )
        .filter(Currency.is_active.is_(True))
        .order_by(Currency.code)
        .all()
    )
    return [
        {
            "code": c.code,
            "name": c.name,
            "symbol": c.symbol,
            "flag": c.flag,
            "rate": Decimal(c.rate),
            "balance": Decimal(balance) if balance is not None else Decimal("0.00"),
        }
        for c, balance in rows
    ]


def build_portfolio(user_id):
    """Value every holding in the base currency and total it.

    Holdings are sorted by base value, largest first. The total is also
    expressed in the user's display currency.
    """
    user = User.query.get(user_id)
    if not user:
        raise NotFoundError("User", user_id)

    currencies = load_currency_view(user_id)
    holdings = []
    total = Decimal("0")
    for c in currencies:
        base_value = c["balance"] * c["rate"]
        total += base_value
        holdings.append({**c, "base_value": base_value})

    for h in holdings:
        h["share"] = float(h["base_value"] / total * 100) if total else 0.0
    holdings.sort(key=lambda h: h["base_value"], reverse=True)

    display = next(
        (c for c in currencies if c["code"] == user.display_currency), None
    )
    if display is None:
        display = next(
            (c for c in currencies if c["code"] == current_app.config["BASE_CURRENCY"]),
            None,
        )
    display_total = total / display["rate"] if display else total

    return {
        "base_currency": current_app.config["BASE_CURRENCY"],
        "total_base": total,
        "display_currency": display["code"] if display else current_app.config["BASE_CURRENCY"],
        "total_display": display_total,
        "holdings": holdings,
        "hide_balances": user.hide_balances,
    }
