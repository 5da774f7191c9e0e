"""
Pydantic request bodies and the response envelope shared by every endpoint.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════
#
# Fields are optional so that absent values reach the presence checks in
# ``database.helpers`` and come back as a 400 envelope.


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ProjectCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    assignee: Optional[str] = None


class TaskStatusUpdate(BaseModel):
    status: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════


class Envelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Optional[Any] = None
    total: Optional[int] = None


class UserPublic(BaseModel):
    """A user as shown to clients — never includes the password hash."""

    id: int
    username: str
    email: str


class AuthEnvelope(Envelope):
    token: str
    user: UserPublic


class HealthEnvelope(Envelope):
    timestamp: datetime


class IndexResponse(BaseModel):
    success: bool = True
    message: str
    version: str
    timestamp: datetime
    endpoints: Dict[str, List[str]]
    documentation: str
