from commentboard.extensions.extensions import ma


class CommentResponseSchema(ma.Schema):
    id = ma.Int()
    user_id = ma.Int(data_key="userId")
    user_name = ma.Str(data_key="userName")
    avatar = ma.Str(allow_none=True)
    content = ma.Str()
    created_at = ma.Str(data_key="createdAt")
    updated_at = ma.Str(data_key="updatedAt", allow_none=True)
    parent_id = ma.Int(data_key="parentId", allow_none=True)
    reactions = ma.Dict(keys=ma.Str(), values=ma.List(ma.Int()))


class CommentTreeSchema(CommentResponseSchema):
    replies = ma.List(ma.Nested(lambda: CommentTreeSchema()))


def dump_comment(comment):
    return CommentResponseSchema().dump(comment)


def dump_tree(tree):
    return CommentTreeSchema(many=True).dump(tree)
