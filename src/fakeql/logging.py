"""
Logging setup for FakeQL using structlog

Every log line goes through the stdlib logging module, so uvicorn and
strawberry output share one stream and one level. Request-scoped values
(request id, GraphQL operation name) live in context variables and are
stamped onto each event by RequestContextProcessor.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

# Request-scoped logging context, set by LoggingContextMiddleware
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


class RequestContextProcessor:
    """Stamp the current request id and GraphQL operation onto log events."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # Unused, but part of the structlog processor signature
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict["request_id"] = request_id

        # Explicit keyword on the log call wins
        operation = graphql_operation_ctx.get()
        if operation:
            event_dict.setdefault("graphql_operation", operation)

        return event_dict


def _resolve_level(debug: bool, level: str | None) -> int:
    if level is None:
        return logging.DEBUG if debug else logging.INFO
    # Unknown names fall back to INFO rather than failing startup
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(
    debug: bool = False,
    level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Console renderer with colors if True, JSON lines if False
        level: Level name such as "INFO"; derived from debug when None
        stream: Where log lines go (default: stdout). The query command
            passes stderr so stdout carries only the result JSON.
    """
    logging.basicConfig(
        level=_resolve_level(debug, level),
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        # Drop events below the configured level early
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        RequestContextProcessor(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request id: 14 url-safe base64 characters.

    8 bytes of microsecond timestamp followed by 2 random bytes, so ids sort
    roughly by time and two requests in the same microsecond still differ.
    """
    timestamp_us = int(time.time() * 1_000_000)
    raw = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)

    # 10 bytes encode to 16 chars with two "=" of padding
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(
    request_id: str | None = None,
    graphql_operation: str | None = None,
) -> str:
    """Set the logging context for the current request.

    Args:
        request_id: Incoming id to reuse (e.g. from X-Request-ID); generated if None
        graphql_operation: Operation name of a GraphQL request, if any

    Returns:
        The request id in effect
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    graphql_operation_ctx.set(graphql_operation)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    graphql_operation_ctx.set(None)
