"""Logfire setup and instrumentation.

Services log through logfire directly, with a span around each operation
that reads or writes a discussion:

    with logfire.span("discussion_service.add_reply", discussion_id=...):
        ...
        logfire.info("Reply added", reply_id=str(reply.id), depth=2)

Nothing is sent to Logfire cloud unless a token is configured or sending
is forced on; events then only go to the console.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

# The identity cookie must never reach traces
_SCRUB_PATTERNS = ["auth_token"]

# Health checks would drown out real traffic
_UNTRACED_URLS = "/health"


def _send_to_logfire(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is created."""
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name="forum-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_SCRUB_PATTERNS),
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
        send_to_logfire=send,
    )


def _request_attributes(request, attributes):
    result = {**attributes, "path": request.url.path}
    discussion_id = request.path_params.get("discussion_id")
    if discussion_id is not None:
        result["discussion_id"] = str(discussion_id)
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, tagged with the discussion it addresses."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=_UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every query, with span context attached as SQL comments."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
