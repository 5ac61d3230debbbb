"""Logfire tracing setup.

Domain services and use cases open their own spans:

    with logfire.span("publish_service.publish", post_id=str(post_id)):
        ...

This module only configures the SDK and instruments the frameworks.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quill.config import Settings

SERVICE_NAME = "quill-api"

# Request values that must never reach a trace
REDACTED_VALUES = frozenset({"auth_token"})


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Traces go to Logfire when OBSERVABILITY__SEND_TO_LOGFIRE says so or,
    failing that, when OBSERVABILITY__LOGFIRE_TOKEN is set. Otherwise output
    stays on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Drop the auth cookie from the endpoint arguments recorded on a span."""
    values = attributes.get("values")
    if not values:
        return attributes
    return {
        **attributes,
        "values": {k: v for k, v in values.items() if k not in REDACTED_VALUES},
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app`` except health checks."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
