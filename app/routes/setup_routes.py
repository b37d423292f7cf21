from flask import Blueprint, jsonify

from app.services import setup_service

setup_bp = Blueprint("setup", __name__)


@setup_bp.route("/setup", methods=["GET"])
def setup():
    setup_service.initialize_schema()
    return jsonify({
        "success": True,
        "message": "Database tables created successfully"
    }), 200
