from app.db import db
from app.models.comment_model import Comment


def create_comment(blog_id, author, content):
    comment = Comment(
        blog_id=blog_id,
        author=author,
        content=content
    )

    db.session.add(comment)
    db.session.flush()
    return comment


def get_comment_by_id(comment_id: int):
    return db.session.get(Comment, comment_id)


def get_comments_by_blog(blog_id: int):
    return (
        Comment.query
        .filter(Comment.blog_id == blog_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )
