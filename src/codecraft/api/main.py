"""FastAPI application entry point for the Codecraft dashboard API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codecraft.api.errors import register_exception_handlers
from codecraft.api.routes import (
    actions,
    deployments,
    function_blocks,
    git_commits,
    health,
    history,
    issues,
    llm_fixes,
    projects,
    stats,
    users,
)
from codecraft.api.schemas.common import ErrorResponse
from codecraft.config import configure_logging, get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and release storage on shutdown."""
    from codecraft.storage import reset_default_storage

    configure_logging(get_settings().log_level)
    yield
    reset_default_storage()


app = FastAPI(
    title="Codecraft API",
    description="API for tracking security scan projects, findings, fixes and deployments",
    version="0.1.0",
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request data"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(projects.router, prefix="/api")
app.include_router(issues.router, prefix="/api")
app.include_router(function_blocks.router, prefix="/api")
app.include_router(llm_fixes.router, prefix="/api")
app.include_router(git_commits.router, prefix="/api")
app.include_router(deployments.router, prefix="/api")
app.include_router(history.router, prefix="/api")
app.include_router(actions.router, prefix="/api")
app.include_router(stats.router, prefix="/api")
app.include_router(users.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "codecraft.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )


if __name__ == "__main__":
    main()
