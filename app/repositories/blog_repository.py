from app.db import db
from app.models.blog_model import Blog


def create_blog(title, content, image=None):
    blog = Blog(
        title=title,
        content=content,
        image=image
    )
    db.session.add(blog)
    db.session.flush()

    return blog


def get_blog_by_id(blog_id: int):
    return db.session.get(Blog, blog_id)


def blog_exists(blog_id: int) -> bool:
    return (
        db.session.query(Blog.id)
        .filter(Blog.id == blog_id)
        .first()
        is not None
    )


def list_blogs():
    return (
        Blog.query
        .order_by(Blog.created_at.desc(), Blog.id.desc())
        .all()
    )
