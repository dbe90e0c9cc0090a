from flask import Blueprint, request, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.transaction_schema import ExchangeRequestSchema, TransactionSchema
from fxwallet.schemas.wallet_schema import CurrencySchema
from fxwallet.services.exchange_service import quote_exchange, execute_exchange
from fxwallet.utils.response_formatter import success_response, error_response

bp = Blueprint("exchange", __name__, url_prefix="/api/v1/exchange")


def _quote_payload(quote):
    return {
        "from": quote["from"],
        "to": quote["to"],
        "amount": float(quote["amount"]),
        "rate": round(float(quote["rate"]), 8),
        "inverse_rate": round(float(quote["inverse_rate"]), 8),
        "converted": float(quote["converted"]),
    }


@bp.route("/quote", methods=["GET"])
@jwt_required()
def quote():
    from_code = request.args.get("from")
    to_code = request.args.get("to")
    amount = request.args.get("amount")
    if not all([from_code, to_code, amount]):
        return error_response("VALIDATION_ERROR", "from, to and amount are required", status=422)

    return success_response({"quote": _quote_payload(quote_exchange(from_code, to_code, amount))})


@bp.route("", methods=["POST"])
@jwt_required()
def exchange():
    uid = get_jwt_identity()
    data = ExchangeRequestSchema().load(request.get_json() or {})

    result = execute_exchange(uid, data["from_currency"], data["to_currency"], data["amount"])
    current_app.logger.info("exchange completed for %s", uid)

    return success_response({
        "exchange": _quote_payload(result["quote"]),
        "transactions": TransactionSchema(many=True).dump(result["transactions"]),
        "currencies": CurrencySchema(many=True).dump(result["currencies"]),
    }, status=201)
