"""
typesense-client - Structured Logging Module

Patterns Applied:
- structlog BoundLogger, JSON or console rendering
- One-time configure_logging(), driven by TypesenseSettings.log_level/log_json

Anti-Patterns Avoided:
- Reconfiguring structlog for every client - prevented via _configured flag

TypesenseClient.from_settings() configures logging from the environment.
Clients built directly leave structlog as the application set it up.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, Processor

SERVICE_NAME = "typesense-client"

_configured: bool = False


def add_service_info(
    logger: logging.Logger,  # noqa: ARG001 - Required by structlog interface
    method_name: str,  # noqa: ARG001 - Required by structlog interface
    event_dict: EventDict,
) -> EventDict:
    """Stamp every event with the library name."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def _processors(json_output: bool) -> list[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_info,
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = True,
    stream: TextIO | None = None,
) -> bool:
    """Configure structlog for client events.

    Only the first call has an effect until reset_logging().

    Args:
        log_level: Minimum level name; unknown names fall back to INFO
        json_output: Render JSON lines instead of console output
        stream: Destination for events, stderr when omitted

    Returns:
        True if this call applied the configuration
    """
    global _configured

    if _configured:
        return False

    threshold = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)
    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=True,
    )
    _configured = True
    return True


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to the given module name."""
    return structlog.get_logger(name)


def reset_logging() -> None:
    """Forget any configuration so tests can configure again."""
    global _configured
    _configured = False
    structlog.reset_defaults()
