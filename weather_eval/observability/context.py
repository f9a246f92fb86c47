"""Scoring run context propagation using contextvars."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

# Context variables for run tracing
run_id_var: ContextVar[str] = ContextVar("run_id", default="")
case_id_var: ContextVar[str] = ContextVar("case_id", default="")


def get_context() -> dict[str, str]:
    """Get current scoring context for logging.

    Returns a dict with run_id and case_id that can be spread
    into structured log calls.

    Example:
        ctx = get_context()
        logger.info("case_scored", **ctx, scorer="content_accuracy")
    """
    ctx = {}
    run_id = run_id_var.get("")
    case_id = case_id_var.get("")

    if run_id:
        ctx["run_id"] = run_id
    if case_id:
        ctx["case_id"] = case_id

    return ctx


def set_run_context(run_id: str) -> None:
    """Set the scoring run id for the current async context."""
    run_id_var.set(run_id)


@contextmanager
def case_context(case_id: str) -> Iterator[None]:
    """Tag log calls with ``case_id`` while scoring one case.

    The previous value is restored on exit, so scoring a case outside a
    task does not leak the id into the caller's context.
    """
    token = case_id_var.set(case_id)
    try:
        yield
    finally:
        case_id_var.reset(token)


def clear_run_context() -> None:
    """Clear scoring context after a run completes."""
    run_id_var.set("")
    case_id_var.set("")
