from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.contact_schema import ContactSchema
from fxwallet.schemas.transaction_schema import (
    SendMoneyRequestSchema,
    ScanRequestSchema,
    TransactionSchema,
)
from fxwallet.services.transfer_service import send_money
from fxwallet.utils.scan import parse_scan_payload
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("send", __name__, url_prefix="/api/v1/send")


@bp.route("", methods=["POST"])
@jwt_required()
def send():
    uid = get_jwt_identity()
    data = SendMoneyRequestSchema().load(request.get_json() or {})

    result = send_money(
        uid,
        data["amount"],
        data["currency"],
        contact_id=data["contact_id"],
        recipient_name=data["recipient_name"],
        recipient_email=data["recipient_email"],
        message=data["message"],
    )

    return success_response({
        "transaction": TransactionSchema().dump(result["transaction"]),
        "contact": ContactSchema().dump(result["contact"]) if result["contact"] else None,
        "contact_created": result["contact_created"],
        "balance": float(result["balance"]),
        "message": result["message"],
    }, status=201)


@bp.route("/scan", methods=["POST"])
@jwt_required()
def scan():
    data = ScanRequestSchema().load(request.get_json() or {})
    return success_response({"recipient": parse_scan_payload(data["payload"])})
