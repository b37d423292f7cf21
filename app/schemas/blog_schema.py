from app.extensions.extensions import ma
from app.schemas.comment_schema import CommentResponseSchema


class BlogResponseSchema(ma.Schema):
    id = ma.Integer()
    title = ma.String()
    content = ma.String()
    image = ma.String(allow_none=True)
    created_at = ma.DateTime()


class BlogDetailResponseSchema(BlogResponseSchema):
    comments = ma.List(ma.Nested(CommentResponseSchema))
