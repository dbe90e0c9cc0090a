import logging
import os

from flask import Flask
from marshmallow import ValidationError

from .config import CONFIGS, DevelopmentConfig
from .extensions import db, migrate, jwt, ma, cors, limiter, bcrypt


def create_app(config_name=None):
    app = Flask(__name__, instance_relative_config=False)
    env = config_name or os.getenv("FLASK_ENV", "development")
    app.config.from_object(CONFIGS.get(env, DevelopmentConfig))

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)
    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",")]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": origins}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    )
    bcrypt.init_app(app)
    limiter.init_app(app)

    # register blueprints
    from fxwallet.routes.auth_routes import bp as auth_bp
    from fxwallet.routes.wallet_routes import bp as wallet_bp
    from fxwallet.routes.exchange_routes import bp as exchange_bp
    from fxwallet.routes.send_routes import bp as send_bp
    from fxwallet.routes.transaction_routes import bp as transaction_bp
    from fxwallet.routes.budget_routes import bp as budget_bp
    from fxwallet.routes.card_routes import bp as card_bp
    from fxwallet.routes.contact_routes import bp as contact_bp
    from fxwallet.routes.settings_routes import bp as settings_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(wallet_bp)
    app.register_blueprint(exchange_bp)
    app.register_blueprint(send_bp)
    app.register_blueprint(transaction_bp)
    app.register_blueprint(budget_bp)
    app.register_blueprint(card_bp)
    app.register_blueprint(contact_bp)
    app.register_blueprint(settings_bp)

    register_error_handlers(app)
    register_jwt_handlers()

    return app


def register_error_handlers(app):
    from fxwallet.utils.exceptions import ServiceError
    from fxwallet.utils.response_formatter import error_response

    @app.errorhandler(ServiceError)
    def service_error(e):
        return error_response(e.code, e.message, details=e.details, status=e.status)

    @app.errorhandler(ValidationError)
    def validation_error(e):
        return error_response(
            "VALIDATION_ERROR", "Invalid request payload", details=e.messages, status=422
        )

    @app.errorhandler(400)
    def bad_request(e):
        return error_response("BAD_REQUEST", str(e), status=400)

    @app.errorhandler(401)
    def unauthorized(e):
        return error_response("UNAUTHORIZED", str(e), status=401)

    @app.errorhandler(404)
    def not_found(e):
        return error_response("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response("METHOD_NOT_ALLOWED", str(e), status=405)

    @app.errorhandler(429)
    def rate_limited(e):
        return error_response("RATE_LIMITED", "Too many requests", status=429)

    @app.errorhandler(500)
    def server_error(e):
        return error_response("SERVER_ERROR", "Internal server error", status=500)


def register_jwt_handlers():
    from fxwallet.utils.response_formatter import error_response

    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response("UNAUTHORIZED", reason, status=401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response("INVALID_TOKEN", reason, status=401)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response("TOKEN_EXPIRED", "Token has expired", status=401)
