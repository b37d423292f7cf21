from flask import Blueprint, request, jsonify

from app.schemas.blog_schema import BlogDetailResponseSchema, BlogResponseSchema
from app.services import blog_service

blog_bp = Blueprint("blogs", __name__)

# Service errors (ValidationError, NotFoundError, StorageError) are turned
# into the JSON envelope by the handlers in app.errors.


@blog_bp.route("/blogs", methods=["GET"])
def list_blogs():
    blogs = blog_service.list_blogs()
    return jsonify({
        "success": True,
        "data": BlogResponseSchema(many=True).dump(blogs)
    }), 200


@blog_bp.route("/blogs/<int:blog_id>", methods=["GET"])
def get_blog(blog_id):
    blog = blog_service.get_blog_with_comments(blog_id)
    return jsonify({
        "success": True,
        "data": BlogDetailResponseSchema().dump(blog)
    }), 200


@blog_bp.route("/blogs", methods=["POST"])
def create_blog():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Invalid JSON body"}), 400

    blog = blog_service.create_blog(
        data.get("title"),
        data.get("content"),
        data.get("image"),
    )
    return jsonify({
        "success": True,
        "data": BlogResponseSchema().dump(blog)
    }), 201
