"""
Record models held by the in-memory store.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "inprogress"
    DONE = "done"


class User(BaseModel):
    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime = Field(default_factory=_utcnow)


class Project(BaseModel):
    id: int
    name: str
    description: str = ""
    owner_user_id: int
    created_at: datetime = Field(default_factory=_utcnow)


class Task(BaseModel):
    id: int
    project_id: int
    title: str
    description: str = ""
    assignee: str
    priority: str = "medium"  # free-form; "low" | "medium" | "high" by convention
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
