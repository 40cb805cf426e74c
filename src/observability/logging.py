"""Structured logging configuration."""

import logging
import sys
from collections.abc import Mapping, MutableMapping
from typing import Any, TextIO

import structlog

from src.fetch.redact import REDACTED_VALUE, is_sensitive_header, redact_headers


# Event keys whose values are credentials
SENSITIVE_EVENT_KEYS = frozenset(
    {
        "developer_token",
        "user_token",
        "music_user_token",
        "authorization",
    }
)


def redact_credentials(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Strip developer and user tokens from an event before it is rendered.

    Credential-named keys are replaced outright and header mappings are
    passed through header redaction, so ``Authorization`` and
    ``Music-User-Token`` values never reach the output.
    """
    for key, value in list(event_dict.items()):
        if key.lower() in SENSITIVE_EVENT_KEYS or is_sensitive_header(key):
            event_dict[key] = REDACTED_VALUE
        elif isinstance(value, Mapping):
            event_dict[key] = redact_headers(dict(value))
    return event_dict


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for catalog requests.

    Sets up structlog with timestamps, log levels, context binding and
    credential redaction ahead of the JSON (or console) renderer.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        redact_credentials,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=output, level=level)


def get_logger(**initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a logger with initial context bound.

    Args:
        initial_values: Context to bind, e.g. ``component="catalog"``.

    Returns:
        Bound logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(**initial_values)
    return logger
