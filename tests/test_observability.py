"""Tests for the observability module."""

from __future__ import annotations

import pytest
import structlog
from structlog.testing import capture_logs

from weather_eval.observability import (
    case_context,
    case_id_var,
    clear_run_context,
    configure_logging,
    get_context,
    get_logger,
    run_id_var,
    set_run_context,
)

# =============================================================================
# Context Tests
# =============================================================================


class TestRunContext:
    """Tests for scoring run context management."""

    def test_empty_context(self):
        clear_run_context()
        assert get_context() == {}

    def test_set_run_only(self):
        set_run_context("run-1")
        try:
            assert get_context() == {"run_id": "run-1"}
        finally:
            clear_run_context()

    def test_case_context_restores_previous_case(self):
        set_run_context("run-1")
        try:
            with case_context("case_001"):
                assert get_context() == {"run_id": "run-1", "case_id": "case_001"}
                assert run_id_var.get() == "run-1"
                assert case_id_var.get() == "case_001"

            assert get_context() == {"run_id": "run-1"}
        finally:
            clear_run_context()

        assert get_context() == {}

    def test_case_context_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with case_context("case_002"):
                raise RuntimeError("scorer blew up")

        assert case_id_var.get() == ""


# =============================================================================
# Logging Tests
# =============================================================================


class TestLogging:
    """Tests for structlog configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer(self):
        configure_logging(json_output=True, log_level="INFO")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert isinstance(processors[0], structlog.processors.TimeStamper)

    def test_console_renderer_without_timestamp(self):
        configure_logging(json_output=False, include_timestamp=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(
            isinstance(p, structlog.processors.TimeStamper) for p in processors
        )

    def test_level_filtering(self):
        configure_logging(json_output=True, log_level="WARNING")

        with capture_logs() as logs:
            logger = get_logger("test")
            logger.info("hidden_event")
            logger.warning("shown_event", scorer="general_llm_judge")

        assert [entry["event"] for entry in logs] == ["shown_event"]
        assert logs[0]["scorer"] == "general_llm_judge"
