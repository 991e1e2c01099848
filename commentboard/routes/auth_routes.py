from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from commentboard.errors import CommentBoardError
from commentboard.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        payload = auth_service.register(
            data.get("name"),
            data.get("email"),
            data.get("password"),
        )
        return jsonify(payload), 201
    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        payload = auth_service.login(
            data.get("email"),
            data.get("password")
        )
        return jsonify(payload), 200
    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code


@auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh_token():
    return jsonify(auth_service.refresh_access_token()), 200
