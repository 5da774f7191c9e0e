"""
FastAPI dependencies for authentication.

Provides ``get_store`` and ``get_current_user`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Header, Request

from auth.jwt import verify_token
from auth.models import TokenClaims
from database.store import InMemoryStore
from utils.errors import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger(__name__)


def get_store(request: Request) -> InMemoryStore:
    """The store created by ``main.create_app``."""
    return request.app.state.store


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from ``Bearer <token>``, or None if there is none."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def authenticate(authorization: Optional[str], *, now: Optional[float] = None) -> TokenClaims:
    """
    Resolve an ``Authorization`` header value to verified claims.

    No token → ``UnauthenticatedError`` (401); a token that fails
    verification → ``InvalidTokenError`` / ``ExpiredTokenError`` (403).
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise UnauthenticatedError("Authentication required")
    try:
        return verify_token(token, now=now)
    except InvalidTokenError as exc:
        logger.debug("Rejected token: %s", exc.message)
        raise


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> TokenClaims:
    """
    Verify the Bearer token and attach its claims to ``request.state.user``.
    """
    claims = authenticate(authorization)
    request.state.user = claims
    return claims
