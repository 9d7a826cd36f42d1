"""Logfire setup and instrumentation.

Services trace their work with spans named ``<service>.<operation>`` and
emit structured events alongside, e.g.::

    with logfire.span("vote_service.apply_vote", intent=intent.value):
        ...
        logfire.info("Vote applied", votable_id=str(document.id), karma_delta=2)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import Settings

SERVICE_NAME = "agora-api"

# Load balancer probes would drown out real traffic
UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Export to Logfire cloud follows ``OBSERVABILITY__SEND_TO_LOGFIRE`` when
    it is set, and the presence of ``OBSERVABILITY__LOGFIRE_TOKEN`` when it
    is not. Console output is always on.
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else observability.logfire_token is not None
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
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes."""
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued through ``engine``.

    Includes the conditional vote writes and counter increments, tagged with
    the span context of the request that issued them.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
