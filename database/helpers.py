"""
Store operations — credential checks and project / task bookkeeping.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from auth.password import hash_password, verify_password
from database.models import Project, Task, TaskStatus, User
from database.store import InMemoryStore
from utils.errors import AuthError, ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


# ── Users ──────────────────────────────────────────────────────────────


def register_user(
    store: InMemoryStore,
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> User:
    """Create a user; emails are unique across the store."""
    if not username or not email or not password:
        raise ValidationError("username, email and password are required")

    password_hash = hash_password(password)
    with store.users.lock:
        if store.users.find(lambda u: u.email == email) is not None:
            raise ConflictError("Email already registered")
        user = store.users.insert(
            lambda user_id: User(
                id=user_id,
                username=username,
                email=email,
                password_hash=password_hash,
            )
        )
    logger.info("Registered user %s (%s)", user.username, user.id)
    return user


def verify_credentials(
    store: InMemoryStore,
    email: Optional[str],
    password: Optional[str],
) -> User:
    if not email or not password:
        raise ValidationError("email and password are required")

    user = store.users.find(lambda u: u.email == email)
    if user is None:
        raise NotFoundError("User does not exist")
    if not verify_password(password, user.password_hash):
        raise AuthError("Incorrect password")
    return user


def get_user(store: InMemoryStore, user_id: int) -> Optional[User]:
    return store.users.find(lambda u: u.id == user_id)


# ── Projects ───────────────────────────────────────────────────────────


def create_project(
    store: InMemoryStore,
    owner_user_id: int,
    name: Optional[str],
    description: Optional[str] = None,
) -> Project:
    if not name:
        raise ValidationError("Project name is required")

    project = store.projects.insert(
        lambda project_id: Project(
            id=project_id,
            name=name,
            description=description or "",
            owner_user_id=owner_user_id,
        )
    )
    logger.info("Project %s created by user %s", project.id, owner_user_id)
    return project


def list_projects(store: InMemoryStore, owner_user_id: int) -> List[Project]:
    return store.projects.filter(lambda p: p.owner_user_id == owner_user_id)


# ── Tasks ──────────────────────────────────────────────────────────────


def create_task(
    store: InMemoryStore,
    project_id: int,
    title: Optional[str],
    *,
    default_assignee: str,
    description: Optional[str] = None,
    priority: Optional[str] = None,
    assignee: Optional[str] = None,
) -> Task:
    """
    Create a task under ``project_id``.

    The project is not looked up: tasks may reference a project that does
    not exist.
    """
    if not title:
        raise ValidationError("Task title is required")

    task = store.tasks.insert(
        lambda task_id: Task(
            id=task_id,
            project_id=project_id,
            title=title,
            description=description or "",
            assignee=assignee or default_assignee,
            priority=priority or "medium",
        )
    )
    logger.info("Task %s created in project %s", task.id, project_id)
    return task


def list_tasks(store: InMemoryStore, project_id: int) -> List[Task]:
    return store.tasks.filter(lambda t: t.project_id == project_id)


def update_task_status(store: InMemoryStore, task_id: int, status: Optional[str]) -> Task:
    """Move a task to any status; transitions are unrestricted."""
    try:
        new_status = TaskStatus(status)
    except ValueError:
        raise ValidationError(
            "Invalid task status; expected one of: "
            + ", ".join(s.value for s in TaskStatus)
        )

    with store.tasks.lock:
        task = store.tasks.find(lambda t: t.id == task_id)
        if task is None:
            raise NotFoundError("Task not found")
        task.status = new_status
        task.updated_at = datetime.now(timezone.utc)
    logger.info("Task %s moved to %s", task_id, new_status.value)
    return task


def delete_task(store: InMemoryStore, task_id: int) -> Task:
    task = store.tasks.remove(lambda t: t.id == task_id)
    if task is None:
        raise NotFoundError("Task not found")
    logger.info("Task %s deleted", task_id)
    return task
