"""
Auth API routes — register, login.

Route prefix: /api
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from auth.dependencies import get_store
from auth.jwt import create_token
from database.helpers import register_user, verify_credentials
from database.models import User
from database.store import InMemoryStore
from utils.errors import AuthError, NotFoundError
from utils.schemas import AuthEnvelope, LoginRequest, RegisterRequest, UserPublic

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _auth_response(user: User, message: str) -> AuthEnvelope:
    return AuthEnvelope(
        message=message,
        token=create_token(user.id, user.email),
        user=UserPublic(id=user.id, username=user.username, email=user.email),
    )


@router.post(
    "/register",
    response_model=AuthEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    store: InMemoryStore = Depends(get_store),
) -> AuthEnvelope:
    """Register a new user and issue a session token."""
    user = register_user(store, req.username, req.email, req.password)
    return _auth_response(user, "Registration successful")


@router.post("/login", response_model=AuthEnvelope, response_model_exclude_none=True)
async def login(
    req: LoginRequest,
    store: InMemoryStore = Depends(get_store),
) -> AuthEnvelope:
    """Login with email + password."""
    try:
        user = verify_credentials(store, req.email, req.password)
    except (NotFoundError, AuthError) as exc:
        logger.warning("Failed login for %s: %s", req.email, exc.message)
        # unknown email and wrong password share the 400 credentials failure
        raise AuthError(exc.message) from exc

    logger.info("Login: %s (%s)", user.username, user.id)
    return _auth_response(user, "Login successful")
