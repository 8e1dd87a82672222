"""
Error types raised while handling countdown GIF requests.
Each error carries the HTTP status and the short message sent to the client.
"""

from http import HTTPStatus


class CountdownError(Exception):
    """Base class for countdown service errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(CountdownError):
    """Missing or invalid bearer token."""

    status_code = HTTPStatus.UNAUTHORIZED


class RequestValidationError(CountdownError):
    """Request body is missing required fields or has invalid values."""

    status_code = HTTPStatus.BAD_REQUEST


class RenderError(CountdownError):
    """Drawing or encoding failed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
