from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from commentboard.errors import CommentBoardError
from commentboard.schemas.comment_schema import dump_comment, dump_tree
from commentboard.services import comment_service
from commentboard.services.auth_service import get_current_identity


comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/comments", methods=["GET"])
def list_comments():
    try:
        tree = comment_service.list_comments()
    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code
    return jsonify({"comments": dump_tree(tree)}), 200


@comment_bp.route("/comments", methods=["POST"])
@jwt_required()
def create_comment():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        comment = comment_service.add_comment(
            get_current_identity(),
            data.get("content"),
            parent_id=data.get("parentId"),
        )
        return jsonify({"comment": dump_comment(comment)}), 201
    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code


@comment_bp.route("/comments/<int:comment_id>", methods=["PUT"])
@jwt_required()
def update_comment(comment_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        comment = comment_service.edit_comment(
            get_current_identity(),
            comment_id,
            data.get("content"),
        )
        return jsonify({"comment": dump_comment(comment)}), 200
    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code


@comment_bp.route("/comments/<int:comment_id>", methods=["DELETE"])
@jwt_required()
def delete_comment(comment_id):
    try:
        comment_service.delete_comment(get_current_identity(), comment_id)
        return jsonify({"message": "Deleted"}), 200
    except CommentBoardError as e:
        return jsonify({"error": str(e)}), e.status_code
