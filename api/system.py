"""
Public system routes — API index and health check.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from auth.dependencies import get_store
from config.settings import config
from database.store import InMemoryStore
from utils.schemas import HealthEnvelope, IndexResponse

router = APIRouter(tags=["system"])

ENDPOINTS = {
    "auth": [
        "POST /api/register - register a user",
        "POST /api/login - log in",
    ],
    "projects": [
        "GET  /api/projects - list your projects",
        "POST /api/projects - create a project",
    ],
    "tasks": [
        "GET  /api/projects/:projectId/tasks - list project tasks",
        "POST /api/projects/:projectId/tasks - create a task",
        "PUT  /api/tasks/:taskId - update task status",
        "DELETE /api/tasks/:taskId - delete a task",
    ],
    "system": [
        "GET  /api/health - health check",
    ],
}


@router.get("/", response_model=IndexResponse)
async def index() -> IndexResponse:
    return IndexResponse(
        message="Team Collaboration Hub API is running",
        version=config.app_version,
        timestamp=datetime.now(timezone.utc),
        endpoints=ENDPOINTS,
        documentation="Use the endpoints above; interactive docs are served at /docs",
    )


@router.get("/api/health", response_model=HealthEnvelope, response_model_exclude_none=True)
async def health(store: InMemoryStore = Depends(get_store)) -> HealthEnvelope:
    return HealthEnvelope(
        message="Server is healthy",
        timestamp=datetime.now(timezone.utc),
        data=store.counts(),
    )
