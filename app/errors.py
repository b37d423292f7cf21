import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException


logger = logging.getLogger(__name__)

HTTP_ERROR_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


class BlogApiError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(BlogApiError):
    status_code = 400


class NotFoundError(BlogApiError):
    status_code = 404


class StorageError(BlogApiError):
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(BlogApiError)
    def handle_blog_api_error(e):
        return jsonify({"success": False, "error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        message = HTTP_ERROR_MESSAGES.get(e.code, e.description)
        return jsonify({"success": False, "error": message}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error while serving request")
        return jsonify({"success": False, "error": "Internal server error"}), 500
