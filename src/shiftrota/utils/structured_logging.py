"""
Structured Logging
==================
structlog integration used for audit-style events (week generated,
rotation advanced, move accepted/rejected).

Usage:
    from shiftrota.utils.structured_logging import get_structured_logger

    log = get_structured_logger("shiftrota.audit")
    log.info("move_rejected", employee_id="e3", reason="ShiftFull")
"""
from typing import Any

import structlog


def configure_structlog(json_output: bool = False) -> None:
    """
    Configure structlog for the application.

    Events are handed to the standard ``logging`` logger of the same
    name, so the handlers installed by ``setup_logging`` (console and
    rotating file) receive them too.

    Args:
        json_output: If True, render events as JSON (for production).
                    If False, use key=value console rendering (for development).
    """
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if json_output:
        processors = shared + [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared + [
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_structured_logger(name: str) -> Any:
    """
    Get a structured logger.

    If structlog has not been configured yet, the stdlib-backed console
    configuration is installed so events never reach structlog's default
    stdout printer. A host's own ``structlog.configure`` is left alone.

    Args:
        name: Logger name (e.g., "shiftrota.audit")
    """
    if not structlog.is_configured():
        configure_structlog()
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls.

    Args:
        **kwargs: Context values (e.g., admin_id="u-17")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
