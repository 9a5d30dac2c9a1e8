"""FastAPI application - Snapix backend.

Run with:
    uvicorn --factory snapix.main:create_app --port 3000
    # or
    python -m snapix.main
"""

import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from snapix import __version__
from snapix.bootstrap import Container, build_container
from snapix.config import (
    Settings,
    bind_request_context,
    clear_request_context,
    get_logger,
    get_settings,
    setup_logging,
)
from snapix.infrastructure.persistence.sqlalchemy import Base
from snapix.presentation.api import dependencies
from snapix.presentation.api.errors import register_exception_handlers
from snapix.presentation.api.routes import auth_router, health_router, posts_router, users_router

logger = get_logger(__name__)


# ============================================================================
# MIDDLEWARE
# ============================================================================


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request correlation id to every log line of the request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        bind_request_context(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_request_context()


# ============================================================================
# APPLICATION FACTORY
# ============================================================================


def create_app(
    settings: Optional[Settings] = None,
    container_factory: Callable[[Settings], Container] = build_container,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use. Defaults to get_settings().
        container_factory: Builds the object graph at startup.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: build the container, create tables outside production.
        Shutdown: dispose of the engine.
        """
        logger.info("application.startup.started", environment=settings.node_env)

        container = container_factory(settings)

        # Production schema is managed by Alembic
        if not settings.is_production:
            async with container.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("application.database.tables_created")

        dependencies.init_dependencies(container)
        logger.info("application.startup.completed")

        yield

        logger.info("application.shutdown.started")
        await container.dispose()
        dependencies.reset_dependencies()
        logger.info("application.shutdown.completed")

    prefix = settings.route_prefix
    docs_enabled = not settings.is_production

    app = FastAPI(
        title=settings.app_name,
        description="User profiles, posts and image storage.",
        version=settings.app_version or __version__,
        docs_url=f"{prefix}/swagger" if docs_enabled else None,
        redoc_url=None,
        openapi_url=f"{prefix}/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Order matters: last added runs first
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(users_router, prefix=prefix)
    app.include_router(posts_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)

    # Local storage is served by the app itself outside production
    if not settings.is_production:
        Path(settings.storage_root).mkdir(parents=True, exist_ok=True)
        app.mount("/static", StaticFiles(directory=settings.storage_root), name="static")

    return app


def run() -> None:
    """Console entry point: serve with uvicorn on ``PORT``."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "snapix.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
