from typing import Dict, Optional


class PostError(Exception):
    """Domain failure that maps to a 4xx/5xx response with a single-key body"""
    status_code = 400
    key = "error"
    message = "Request failed"

    def __init__(self, message: Optional[str] = None, key: Optional[str] = None):
        if message is not None:
            self.message = message
        if key is not None:
            self.key = key
        super().__init__(self.message)

    def body(self) -> Dict[str, str]:
        return {self.key: self.message}


class ValidationFailed(PostError):
    status_code = 400
    key = "validation"
    message = "Invalid input"

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__()

    def body(self) -> Dict[str, str]:
        return dict(self.errors)


class PostNotFound(PostError):
    status_code = 404
    key = "postnotfound"
    message = "No post found"


class NotAuthorized(PostError):
    status_code = 401
    key = "notauthorized"
    message = "User not authorized"


class AlreadyLiked(PostError):
    status_code = 400
    key = "alreadyliked"
    message = "User already liked this post"


class NotLiked(PostError):
    status_code = 400
    key = "notliked"
    message = "User had not previously liked this post"


class CommentNotFound(PostError):
    status_code = 404
    key = "commentnotexists"
    message = "Comment does not exist"


class StoreUnavailable(PostError):
    status_code = 503
    key = "storeunavailable"
    message = "Post store is unavailable"
