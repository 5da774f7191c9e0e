"""
Application error hierarchy.

Every error carries the HTTP status it maps to; the handlers in
``api.middleware`` render them into the standard response envelope.
"""

from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(ApiError):
    status_code = 400
    default_message = "Resource already exists"


class AuthError(ApiError):
    """Credentials were presented but did not match."""

    status_code = 400
    default_message = "Invalid email or password"


class UnauthenticatedError(ApiError):
    """No identity was presented."""

    status_code = 401
    default_message = "Authentication required"


class InvalidTokenError(ApiError):
    """An identity was presented and rejected."""

    status_code = 403
    default_message = "Invalid token"


class ExpiredTokenError(InvalidTokenError):
    default_message = "Token expired"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"
