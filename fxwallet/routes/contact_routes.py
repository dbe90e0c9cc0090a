from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.contact_schema import ContactSchema, NewContactSchema
from fxwallet.services.contact_service import list_contacts, add_contact
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("contacts", __name__, url_prefix="/api/v1/contacts")


@bp.route("", methods=["GET"])
@jwt_required()
def contacts():
    uid = get_jwt_identity()
    search = request.args.get("q", "").strip()
    return success_response({
        "contacts": ContactSchema(many=True).dump(list_contacts(uid, search or None))
    })


@bp.route("", methods=["POST"])
@jwt_required()
def new_contact():
    uid = get_jwt_identity()
    data = NewContactSchema().load(request.get_json() or {})

    contact = add_contact(uid, data["name"], data["email"], data["avatar"])
    return success_response({"contact": ContactSchema().dump(contact)}, status=201)
