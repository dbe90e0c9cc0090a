from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.card_schema import CardSchema, CardStatusSchema
from fxwallet.services.card_service import list_cards, update_card_status, freeze_card, unfreeze_card
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("cards", __name__, url_prefix="/api/v1/cards")


@bp.route("", methods=["GET"])
@jwt_required()
def cards():
    uid = get_jwt_identity()
    return success_response({"cards": CardSchema(many=True).dump(list_cards(uid))})


@bp.route("/<card_id>/status", methods=["PATCH"])
@jwt_required()
def set_status(card_id):
    uid = get_jwt_identity()
    data = CardStatusSchema().load(request.get_json() or {})

    card = update_card_status(uid, card_id, data["status"])
    return success_response({"card": CardSchema().dump(card)})


@bp.route("/<card_id>/freeze", methods=["POST"])
@jwt_required()
def freeze(card_id):
    card = freeze_card(get_jwt_identity(), card_id)
    return success_response({"card": CardSchema().dump(card)})


@bp.route("/<card_id>/unfreeze", methods=["POST"])
@jwt_required()
def unfreeze(card_id):
    card = unfreeze_card(get_jwt_identity(), card_id)
    return success_response({"card": CardSchema().dump(card)})
