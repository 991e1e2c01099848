from commentboard.extensions.extensions import ma


class UserResponseSchema(ma.Schema):
    id = ma.Int()
    name = ma.Str()
    email = ma.Str()
    avatar_url = ma.Str(data_key="avatarUrl", allow_none=True)
