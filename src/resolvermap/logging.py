"""
Centralized logging configuration using structlog
"""

import logging
import sys
from contextvars import ContextVar, Token
from typing import Any

import structlog

# Context variables for resolver map tracking
resolver_map_ctx: ContextVar[str | None] = ContextVar("resolver_map", default=None)
namespace_ctx: ContextVar[str | None] = ContextVar("namespace", default=None)


class ResolverContextFilter:
    """Add resolver map context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add resolver map context to the event dict."""
        _ = logger, method_name

        resolver_map = resolver_map_ctx.get()
        namespace = namespace_ctx.get()

        if resolver_map:
            event_dict["resolver_map"] = resolver_map

        if namespace:
            event_dict["namespace"] = namespace

        return event_dict


def configure_logging(debug: bool = False) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
    """

    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        ResolverContextFilter(),
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
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def set_resolver_context(
    resolver_map: str | None = None, namespace: str | None = None
) -> list[Token]:
    """Set resolver map context variables.

    Args:
        resolver_map: Name of the resolver map being built or served
        namespace: Namespace the resources were read from

    Returns:
        Tokens for ``reset_resolver_context`` to restore the previous values
    """
    tokens: list[Token] = []
    if resolver_map is not None:
        tokens.append(resolver_map_ctx.set(resolver_map))
    if namespace is not None:
        tokens.append(namespace_ctx.set(namespace))
    return tokens


def reset_resolver_context(tokens: list[Token]) -> None:
    """Restore the context variables replaced by ``set_resolver_context``."""
    for token in reversed(tokens):
        token.var.reset(token)


