from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from commentboard.errors import CommentBoardError
from commentboard.services.auth_service import get_current_identity
from commentboard.services.reaction_service import toggle_reaction

reaction_bp = Blueprint("reactions", __name__)

@reaction_bp.route("/reactions", methods=["POST"])
@jwt_required()
def react():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        reactions = toggle_reaction(
            get_current_identity(),
            data.get("commentId"),
            data.get("reaction"),
        )
        return jsonify({"reactions": reactions}), 200

    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code
