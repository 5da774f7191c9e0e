"""
REST API routes — projects and tasks.

Every route here requires a valid Bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth.dependencies import get_current_user, get_store
from auth.models import TokenClaims
from database.helpers import (
    create_project,
    create_task,
    delete_task,
    get_user,
    list_projects,
    list_tasks,
    update_task_status,
)
from database.store import InMemoryStore
from utils.schemas import Envelope, ProjectCreate, TaskCreate, TaskStatusUpdate


router = APIRouter(
    dependencies=[Depends(get_current_user)],
    tags=["projects"],
)

_envelope = {"response_model": Envelope, "response_model_exclude_none": True}


# ── Projects ───────────────────────────────────────────────────────────


@router.get("/projects", **_envelope)
async def get_projects(
    store: InMemoryStore = Depends(get_store),
    user: TokenClaims = Depends(get_current_user),
) -> Envelope:
    """Projects owned by the caller, in creation order."""
    projects = list_projects(store, user.user_id)
    return Envelope(data=projects, total=len(projects))


@router.post("/projects", status_code=status.HTTP_201_CREATED, **_envelope)
async def post_project(
    body: ProjectCreate,
    store: InMemoryStore = Depends(get_store),
    user: TokenClaims = Depends(get_current_user),
) -> Envelope:
    project = create_project(store, user.user_id, body.name, body.description)
    return Envelope(message="Project created", data=project)


# ── Tasks ──────────────────────────────────────────────────────────────


@router.get("/projects/{project_id}/tasks", **_envelope)
async def get_project_tasks(
    project_id: int,
    store: InMemoryStore = Depends(get_store),
) -> Envelope:
    tasks = list_tasks(store, project_id)
    return Envelope(data=tasks, total=len(tasks))


@router.post("/projects/{project_id}/tasks", status_code=status.HTTP_201_CREATED, **_envelope)
async def post_project_task(
    project_id: int,
    body: TaskCreate,
    store: InMemoryStore = Depends(get_store),
    user: TokenClaims = Depends(get_current_user),
) -> Envelope:
    creator = get_user(store, user.user_id)
    task = create_task(
        store,
        project_id,
        body.title,
        default_assignee=creator.username if creator else user.email,
        description=body.description,
        priority=body.priority,
        assignee=body.assignee,
    )
    return Envelope(message="Task created", data=task)


@router.put("/tasks/{task_id}", **_envelope)
async def put_task_status(
    task_id: int,
    body: TaskStatusUpdate,
    store: InMemoryStore = Depends(get_store),
) -> Envelope:
    """Change a task's status. Any authenticated user may update any task."""
    task = update_task_status(store, task_id, body.status)
    return Envelope(message="Task status updated", data=task)


@router.delete("/tasks/{task_id}", **_envelope)
async def remove_task(
    task_id: int,
    store: InMemoryStore = Depends(get_store),
) -> Envelope:
    delete_task(store, task_id)
    return Envelope(message="Task deleted")
