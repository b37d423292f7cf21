from app.extensions.extensions import ma


class CommentResponseSchema(ma.Schema):
    id = ma.Integer()
    blog_id = ma.Integer()
    author = ma.String()
    content = ma.String()
    created_at = ma.DateTime()
