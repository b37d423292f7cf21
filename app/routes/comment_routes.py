from flask import Blueprint, request, jsonify

from app.schemas.comment_schema import CommentResponseSchema
from app.services import comment_service


comment_bp = Blueprint("comments", __name__)

@comment_bp.route("/blogs/<int:blog_id>/comments", methods=["POST"])
def create_comment(blog_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Invalid JSON body"}), 400

    comment = comment_service.add_comment(
        blog_id=blog_id,
        author=data.get("author"),
        content=data.get("content")
    )
    return jsonify({
        "success": True,
        "data": CommentResponseSchema().dump(comment)
    }), 201
