"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
Sessions are stateless: there is no revocation list, a token stays valid
until ``exp`` regardless of later account changes.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from auth.models import TokenClaims
from config.settings import config
from utils.errors import ExpiredTokenError, InvalidTokenError


def _sign(raw: bytes) -> str:
    return hmac.new(config.jwt_secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: int, email: str, *, now: Optional[float] = None) -> str:
    """Create a signed token containing ``user_id``, ``email`` and expiry."""
    issued_at = int(time.time() if now is None else now)
    payload = {
        "user_id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + config.jwt_expiry_seconds,
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(raw)


def verify_token(token: str, *, now: Optional[float] = None) -> TokenClaims:
    """
    Verify token and return its claims.

    Raises ``InvalidTokenError`` on a bad signature or malformed payload,
    ``ExpiredTokenError`` once the current time is past ``exp``.
    """
    parts = token.split(".", 1)
    if len(parts) != 2:
        raise InvalidTokenError("Malformed token")
    try:
        raw = urlsafe_b64decode(parts[0].encode())
    except ValueError as exc:
        raise InvalidTokenError("Malformed token") from exc
    if not hmac.compare_digest(parts[1].encode(), _sign(raw).encode()):
        raise InvalidTokenError("Invalid token signature")

    try:
        claims = TokenClaims.model_validate(json.loads(raw))
    except (ValueError, PydanticValidationError) as exc:
        raise InvalidTokenError("Malformed token payload") from exc

    current = time.time() if now is None else now
    if current > claims.exp:
        raise ExpiredTokenError("Token expired")
    return claims
