class CommentBoardError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ValidationError(CommentBoardError):
    status_code = 400
    default_message = "Invalid input"


class AuthError(CommentBoardError):
    status_code = 401
    default_message = "Authentication required"


class ForbiddenError(CommentBoardError):
    status_code = 403
    default_message = "Not allowed"


class NotFoundError(CommentBoardError):
    status_code = 404
    default_message = "Comment not found"


class StorageFailure(CommentBoardError):
    status_code = 500
    default_message = "Storage unavailable"
