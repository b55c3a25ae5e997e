"""Error taxonomy shared by the client, the lifecycle accessor and the hooks.

Every failure raised by this package derives from ``LocationIQError``. HTTP
failures are classified into ``APIError`` subclasses; the original exception
is kept on ``cause`` and chained with ``raise ... from``.
"""

from typing import Any


class LocationIQError(Exception):
    """Base class for every error raised by the library."""

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidArgumentError(LocationIQError, ValueError):
    """A precondition failed before any network call was made."""


class NotInitializedError(LocationIQError, RuntimeError):
    """The process-wide client was requested before it was configured."""


class DecodeError(LocationIQError):
    """A response body is missing fields its result type requires."""

    def __init__(self, result_type: str, *, cause: BaseException | None = None):
        super().__init__(f"Failed to decode {result_type} response", cause=cause)
        self.result_type = result_type


class APIError(LocationIQError):
    """An outbound call failed. ``status_code`` is None for network-level failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, cause=cause)
        self.status_code = status_code


class UnauthorizedError(APIError):
    def __init__(self, *, cause: BaseException | None = None):
        super().__init__("Unauthorized: Invalid API key", status_code=401, cause=cause)


class RateLimitedError(APIError):
    def __init__(self, *, cause: BaseException | None = None):
        super().__init__("Rate limit exceeded", status_code=429, cause=cause)


class BadRequestError(APIError):
    """HTTP 400. ``body`` holds the response payload the API sent back."""

    def __init__(self, body: Any, *, cause: BaseException | None = None):
        super().__init__(f"Bad request: {body}", status_code=400, cause=cause)
        self.body = body


class UnknownAPIError(APIError):
    pass
