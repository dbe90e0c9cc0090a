from flask import Blueprint, request, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity, create_access_token
from datetime import timedelta
from fxwallet.services.auth_service import register_user, authenticate_user, generate_tokens_for_user
from fxwallet.services.profile_service import get_user
from fxwallet.schemas.user_schema import RegisterSchema, LoginSchema
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")


@bp.route("/register", methods=["POST"])
def register():
    data = RegisterSchema().load(request.get_json() or {})

    user = register_user(data["email"], data["password"], data["full_name"])
    access, refresh = generate_tokens_for_user(user)
    current_app.logger.info("new account %s signed up", user.id)

    return success_response({
        "user": user.to_dict(),
        "access_token": access,
        "refresh_token": refresh
    }, status=201)


@bp.route("/login", methods=["POST"])
def login():
    data = LoginSchema().load(request.get_json() or {})

    user = authenticate_user(data["email"], data["password"])
    access, refresh = generate_tokens_for_user(user)

    return success_response({
        "user": user.to_dict(),
        "access_token": access,
        "refresh_token": refresh
    })


@bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    uid = get_jwt_identity()
    access = create_access_token(
        identity=uid,
        expires_delta=timedelta(seconds=current_app.config.get("ACCESS_EXPIRES", 86400))
    )
    return success_response({"access_token": access})


@bp.route("/logout", methods=["POST"])
@jwt_required()
def logout():
    # tokens are stateless; the client discards them
    return success_response({"message": "Successfully logged out"})


@bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    user = get_user(get_jwt_identity())
    return success_response(user.to_dict())
