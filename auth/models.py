"""Session claims carried inside a signed token."""

from __future__ import annotations

from pydantic import BaseModel


class TokenClaims(BaseModel):
    user_id: int
    email: str
    iat: int
    exp: int
