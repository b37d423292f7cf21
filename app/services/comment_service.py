import logging

from sqlalchemy.exc import SQLAlchemyError

from app.db import db
from app.errors import NotFoundError, ValidationError
from app.repositories import blog_repository, comment_repository
from app.services.common import is_non_empty_string, is_storable_id, storage_error


logger = logging.getLogger(__name__)


def add_comment(blog_id, author, content):
    if not is_non_empty_string(author) or not is_non_empty_string(content):
        raise ValidationError("Author and content are required")

    if not is_storable_id(blog_id):
        logger.info("Rejected comment for out-of-range blog id %s", blog_id)
        raise NotFoundError("Blog not found")

    try:
        if not blog_repository.blog_exists(blog_id):
            logger.info("Rejected comment for missing blog %s", blog_id)
            raise NotFoundError("Blog not found")

        comment = comment_repository.create_comment(
            blog_id=blog_id,
            author=author,
            content=content
        )
        db.session.commit()
        comment_id = comment.id

        created = comment_repository.get_comment_by_id(comment_id)
    except SQLAlchemyError as e:
        raise storage_error(e, f"add comment to blog {blog_id}") from e

    logger.info("Created comment %s on blog %s", comment_id, blog_id)
    return created
