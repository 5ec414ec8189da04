"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Tag created", keyword=keyword, tag_name=tag.name)

    with logfire.span("publish_post.execute", title=title):
        ...
"""

import sys

import logfire

from publisher import __version__
from publisher.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Console output is written to stderr so it never interleaves with MCP
    frames on stdout. Telemetry is sent to Logfire cloud only when a token is
    configured, unless OBSERVABILITY__SEND_TO_LOGFIRE says otherwise.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "halo-publisher",
        "service_version": __version__,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="never",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            output=sys.stderr,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_httpx() -> None:
    """Instrument httpx so every Halo request is traced."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
