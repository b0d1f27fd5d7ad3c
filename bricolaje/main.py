"""Bricolaje FastAPI application entry point."""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bricolaje import __version__
from bricolaje.api import router as api_router
from bricolaje.config import get_settings
from bricolaje.db import close_db, init_db
from bricolaje.errors import BricolajeError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("bricolaje.startup", version=__version__)
    await init_db()

    yield

    logger.info("bricolaje.shutdown")
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Bricolaje Cargos",
        description="Cargo (job position) catalogue",
        version=__version__,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Add request ID to all requests."""
        request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = request_id
        with structlog.contextvars.bound_contextvars(request_id=request_id):
            response = await call_next(request)
        response.headers["X-Request-Id"] = request_id
        return response

    @app.exception_handler(BricolajeError)
    async def bricolaje_error_handler(request: Request, exc: BricolajeError):
        """Handle Bricolaje errors with consistent format."""
        request_id = getattr(request.state, "request_id", None)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(request_id),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    app.include_router(api_router)

    return app


# Create default app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bricolaje.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )
