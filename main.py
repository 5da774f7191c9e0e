"""
Team Collaboration Hub — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as api_router
from api.system import router as system_router
from auth.routes import router as auth_router
from config.settings import config
from database.store import InMemoryStore

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "multipart"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application ready to accept requests.")
    yield
    logger.info("Shutting down; in-memory data is discarded (%s).", app.state.store.counts())


def create_app(store: Optional[InMemoryStore] = None) -> FastAPI:
    app = FastAPI(
        title="Team Collaboration Hub API",
        version=config.app_version,
        description="Users, projects and tasks with token-based sessions.",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else InMemoryStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(system_router)
    app.include_router(auth_router, prefix="/api")
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
