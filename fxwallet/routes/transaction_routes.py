from flask import Blueprint, request, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.transaction_schema import TransactionSchema, NewTransactionSchema
from fxwallet.services.transaction_service import (
    add_transaction,
    filter_transactions,
    summarize,
    group_by_day,
)
from fxwallet.utils.money import format_money
from fxwallet.utils.pagination import paginate_query
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("transactions", __name__, url_prefix="/api/v1/transactions")


@bp.route("", methods=["GET"])
@jwt_required()
def list_transactions():
    uid = get_jwt_identity()
    page = request.args.get("page", 1, type=int)
    limit = request.args.get("limit", current_app.config["DEFAULT_PAGE_SIZE"], type=int)

    q = filter_transactions(
        uid,
        tx_type=request.args.get("type"),
        search=request.args.get("q"),
        month=request.args.get("month"),
    )
    items, pagination = paginate_query(q, page, limit)
    totals = summarize(q)
    schema = TransactionSchema(many=True)

    return success_response({
        "transactions": schema.dump(items),
        "groups": [
            {"date": day, "transactions": schema.dump(txs)}
            for day, txs in group_by_day(items).items()
        ],
        "summary": {
            "total_spent": format_money(totals["total_spent"]),
            "total_received": format_money(totals["total_received"]),
        },
        "pagination": pagination,
    })


@bp.route("", methods=["POST"])
@jwt_required()
def create_transaction():
    uid = get_jwt_identity()
    data = NewTransactionSchema().load(request.get_json() or {})

    tx = add_transaction(uid, data)
    return success_response({"transaction": TransactionSchema().dump(tx)}, status=201)
