import logging

from sqlalchemy.exc import SQLAlchemyError

from app.db import db
# Imported so both tables are registered on the metadata before create_all.
from app.models.blog_model import Blog  # noqa: F401
from app.models.comment_model import Comment  # noqa: F401
from app.services.common import storage_error


logger = logging.getLogger(__name__)


def initialize_schema():
    """Create the blogs and comments tables if they are missing.

    ``create_all`` checks for each table first, so calling this again on a
    populated database leaves existing rows untouched.
    """
    try:
        db.create_all()
    except SQLAlchemyError as e:
        raise storage_error(e, "create tables") from e

    logger.info("Database tables are ready")
