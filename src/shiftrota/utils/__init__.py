"""Utilities package for the shift rota engine."""
from .logging_setup import (
    TRACE,
    EngineLogger,
    get_logger,
    log_function_call,
    log_rule,
    setup_logging,
)
from .structured_logging import bind_context, clear_context, configure_structlog, get_structured_logger

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_rule",
    "EngineLogger",
    "TRACE",
    "configure_structlog",
    "get_structured_logger",
    "bind_context",
    "clear_context",
]
