class PostsApiError(Exception):
    """Base class for failures raised by the posts test helpers."""


class MalformedTargetError(PostsApiError, ValueError):
    """The request target could not be built into a valid http(s) URI."""

    def __init__(self, target, reason):
        self.target = target
        self.reason = reason
        super().__init__(f"Malformed request target {target!r}: {reason}")


class DecodeError(PostsApiError, ValueError):
    """The response body is not JSON in the declared charset, or not shaped like a Post."""

    def __init__(self, message, url=None):
        self.url = url
        if url is not None:
            message = f"{message} (url: {url})"
        super().__init__(message)
