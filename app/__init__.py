import logging

from flask import Flask

from app.cli import register_commands
from app.config import Config
from app.db import db
from app.errors import register_error_handlers
from app.extensions.extensions import cors, ma
from app.routes.blog_routes import blog_bp
from app.routes.comment_routes import comment_bp
from app.routes.setup_routes import setup_bp
from app.services import setup_service


def _configure_logging(app):
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.from_mapping(test_config)

    _configure_logging(app)
    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    db.init_app(app)
    ma.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ALLOWED_ORIGINS"]}},
    )

    app.register_blueprint(setup_bp, url_prefix="/api")
    app.register_blueprint(blog_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")

    register_error_handlers(app)
    register_commands(app)

    if app.config["DB_AUTO_CREATE"]:
        with app.app_context():
            setup_service.initialize_schema()

    return app
