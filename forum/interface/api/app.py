"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import answers, health
from forum.util.di.container import create_container, setup_di
from forum.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(
    container: AsyncContainer | None = None, instrument: bool = True
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container is built when omitted
        instrument: Whether to attach Logfire instrumentation

    Returns:
        Configured application
    """
    settings = Settings()

    if instrument:
        # Outbound revalidation calls
        instrument_httpx()

    app_instance = FastAPI(
        title="Forum Answers API",
        description="Answers, votes and reputation for a Q&A forum",
        version="0.1.0",
    )

    if instrument:
        instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(answers.router)

    return app_instance
