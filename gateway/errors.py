"""Errors raised by resolvers and the REST client.

Each error exposes an ``extensions`` dict; graphql-core copies it onto the
field-level error it builds around the original exception, so clients can
branch on ``extensions.code``.
"""

from typing import Optional


class GatewayError(Exception):
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict:
        return {"code": self.code}


class ValidationError(GatewayError):
    """Input rejected before any backend call is made."""

    code = "BAD_USER_INPUT"


class TransportError(GatewayError):
    """The backend could not be reached or answered with something unusable."""

    code = "BACKEND_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def extensions(self) -> dict:
        extensions = super().extensions
        if self.status_code is not None:
            extensions["status"] = self.status_code
        return extensions


class NotFoundError(TransportError):
    code = "NOT_FOUND"

    def __init__(self, message: str):
        super().__init__(message, status_code=404)
