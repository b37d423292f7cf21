from app.db import db
from datetime import datetime

class Blog(db.Model):
    __tablename__ = "blogs"
    # AUTOINCREMENT keeps ids monotonic even after rows are removed.
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    image = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Children are removed by the ON DELETE CASCADE on comments.blog_id.
    comments = db.relationship(
        "Comment",
        backref="blog",
        lazy="select",
        passive_deletes=True
    )
