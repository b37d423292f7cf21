import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from app.db import db
from app.errors import NotFoundError, ValidationError
from app.models.comment_model import Comment
from app.repositories import blog_repository, comment_repository
from app.services.common import is_non_empty_string, is_storable_id, storage_error


logger = logging.getLogger(__name__)


@dataclass
class BlogDetail:
    """A blog together with its comments, oldest comment first."""

    id: int
    title: str
    content: str
    image: Optional[str]
    created_at: datetime
    comments: list[Comment] = field(default_factory=list)

    @classmethod
    def from_models(cls, blog, comments):
        return cls(
            id=blog.id,
            title=blog.title,
            content=blog.content,
            image=blog.image,
            created_at=blog.created_at,
            comments=list(comments),
        )


def list_blogs():
    try:
        return blog_repository.list_blogs()
    except SQLAlchemyError as e:
        raise storage_error(e, "list blogs") from e


def get_blog_with_comments(blog_id: int) -> BlogDetail:
    if not is_storable_id(blog_id):
        raise NotFoundError("Blog not found")

    try:
        blog = blog_repository.get_blog_by_id(blog_id)
        if not blog:
            logger.info("Blog %s not found", blog_id)
            raise NotFoundError("Blog not found")

        comments = comment_repository.get_comments_by_blog(blog_id)
    except SQLAlchemyError as e:
        raise storage_error(e, f"load blog {blog_id}") from e

    return BlogDetail.from_models(blog, comments)


def create_blog(title, content, image=None):
    if not is_non_empty_string(title) or not is_non_empty_string(content):
        raise ValidationError("Title and content are required")

    if not is_non_empty_string(image):
        image = None

    try:
        blog = blog_repository.create_blog(
            title=title,
            content=content,
            image=image
        )
        db.session.commit()
        blog_id = blog.id

        created = blog_repository.get_blog_by_id(blog_id)
    except SQLAlchemyError as e:
        raise storage_error(e, "create blog") from e

    logger.info("Created blog %s", blog_id)
    return created
