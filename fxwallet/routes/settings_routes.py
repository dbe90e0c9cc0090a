from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.user_schema import SettingsSchema
from fxwallet.services.profile_service import get_user, update_settings
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("settings", __name__, url_prefix="/api/v1/settings")


@bp.route("", methods=["GET"])
@jwt_required()
def settings():
    user = get_user(get_jwt_identity())
    return success_response({"settings": user.to_dict()})


@bp.route("", methods=["PATCH"])
@jwt_required()
def patch_settings():
    uid = get_jwt_identity()
    data = SettingsSchema().load(request.get_json() or {})

    user = update_settings(uid, data)
    return success_response({"settings": user.to_dict()}, "Settings updated")
