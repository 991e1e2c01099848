import logging

from flask import Flask, jsonify
from flask_cors import CORS

from commentboard.config import Config
from commentboard.extensions.extensions import jwt, ma, socketio
from commentboard.extensions.json_store import get_store
from commentboard.logging_config import setup_logging
from commentboard.routes.auth_routes import auth_bp
from commentboard.routes.comment_routes import comment_bp
from commentboard.routes.reaction_routes import reaction_bp
from commentboard.socket_events import register_socket_events


logger = logging.getLogger(__name__)


def _register_jwt_handlers():
    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error": "Missing authorization header"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error": "Invalid token"}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token expired"}), 401


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(app.config["LOG_LEVEL"])

    CORS(app, origins=app.config["CORS_ALLOWED_ORIGINS"], supports_credentials=True)
    ma.init_app(app)
    jwt.init_app(app)
    _register_jwt_handlers()
    socketio.init_app(app, cors_allowed_origins=app.config["SOCKETIO_CORS_ALLOWED_ORIGINS"])

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(reaction_bp, url_prefix="/api")

    register_socket_events()

    with app.app_context():
        get_store().load()

    logger.info("Comment board ready, data file %s", app.config["DATA_FILE"])
    return app
