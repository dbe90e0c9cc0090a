from flask import Blueprint
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.wallet_schema import CurrencySchema, WalletHoldingSchema
from fxwallet.schemas.transaction_schema import TransactionSchema
from fxwallet.services.wallet_service import load_currency_view, build_portfolio
from fxwallet.services.transaction_service import recent_transactions
from fxwallet.utils.money import format_money
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("wallets", __name__, url_prefix="/api/v1")


def _mask(holdings):
    return [{**h, "balance": None, "base_value": None, "share": None} for h in holdings]


@bp.route("/currencies", methods=["GET"])
@jwt_required()
def currencies():
    uid = get_jwt_identity()
    return success_response({
        "currencies": CurrencySchema(many=True).dump(load_currency_view(uid))
    })


@bp.route("/wallets", methods=["GET"])
@jwt_required()
def wallets():
    uid = get_jwt_identity()
    portfolio = build_portfolio(uid)
    holdings = portfolio["holdings"]
    if portfolio["hide_balances"]:
        holdings = _mask(holdings)

    return success_response({
        "base_currency": portfolio["base_currency"],
        "total_base": None if portfolio["hide_balances"] else format_money(portfolio["total_base"]),
        "wallets": WalletHoldingSchema(many=True).dump(holdings),
        "hide_balances": portfolio["hide_balances"],
    })


@bp.route("/home", methods=["GET"])
@jwt_required()
def home():
    uid = get_jwt_identity()
    portfolio = build_portfolio(uid)
    held = [h for h in portfolio["holdings"] if h["balance"] != 0]
    hidden = portfolio["hide_balances"]

    return success_response({
        "display_currency": portfolio["display_currency"],
        "total_balance": None if hidden else format_money(portfolio["total_display"]),
        "total_base": None if hidden else format_money(portfolio["total_base"]),
        "wallets": WalletHoldingSchema(many=True).dump(_mask(held) if hidden else held),
        "recent_transactions": TransactionSchema(many=True).dump(recent_transactions(uid)),
        "hide_balances": hidden,
    })
