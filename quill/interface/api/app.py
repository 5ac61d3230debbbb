"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quill.adapter.error import AdapterError
from quill.config import Settings
from quill.domain.service import PublishScheduler
from quill.interface.api.routes import comments, health, posts
from quill.interface.jobs import make_publish_job_runner
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Bind the publish scheduler to the job runner for the app's lifetime.

    The container is read at startup, so a container installed with
    ``setup_di`` after ``create_app`` (as the tests do) is the one used.
    """
    container: AsyncContainer = app_instance.state.dishka_container
    scheduler = await container.get(PublishScheduler)
    scheduler.bind(make_publish_job_runner(container))
    logfire.info("Publish scheduler bound")

    yield

    await container.close()


async def adapter_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer 500 for infrastructure failures that escape a use case."""
    logfire.error(
        "Infrastructure failure",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quill API",
        description="Backend API for Quill - write drafts, publish posts, discuss them",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)
    app_instance.add_exception_handler(AdapterError, adapter_error_handler)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)

    return app_instance
