"""Observability module for logging and run context."""

from .context import (
    case_context,
    case_id_var,
    clear_run_context,
    get_context,
    run_id_var,
    set_run_context,
)
from .logging import configure_logging, get_logger

__all__ = [
    # Context
    "run_id_var",
    "case_id_var",
    "get_context",
    "set_run_context",
    "case_context",
    "clear_run_context",
    # Logging
    "configure_logging",
    "get_logger",
]
