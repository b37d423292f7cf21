from app.db import db
from datetime import datetime

class Comment(db.Model):
    __tablename__ = "comments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)

    blog_id = db.Column(
        db.Integer,
        db.ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False
    )

    author = db.Column(db.Text, nullable=False)

    content = db.Column(db.Text, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
