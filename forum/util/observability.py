"""Logfire setup and instrumentation hooks.

Services emit structured events and spans directly:

    logfire.info("Answer created", answer_id=str(answer.id))

    with logfire.span("vote_service.upvote_answer", answer_id=str(answer_id)):
        ...

``configure_logfire`` must run before any instrumentation; scripts/start_app.py
does this before uvicorn imports the application.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

SERVICE_NAME = "forum-answers"


def _send_to_logfire(settings: Settings) -> bool:
    # An explicit flag wins; otherwise a token means "send"
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Without OBSERVABILITY__LOGFIRE_TOKEN events only go to the console.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        service=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``."""
    logfire.instrument_fastapi(app, capture_headers=False)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through ``engine``.

    Args:
        engine: Async engine; its sync engine carries the event hooks
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound revalidation calls."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
