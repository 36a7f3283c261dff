"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO
from unittest.mock import patch

import structlog

from fossbox.core.logging import (
    bind_contextvars,
    configure_logging,
    get_logger,
)


def capture_json(event: str, **fields) -> dict:
    """Log one event in production mode and return the parsed JSON line."""
    output = StringIO()
    handler = logging.StreamHandler(output)
    handler.setLevel(logging.INFO)
    configure_logging(development=False, log_level="INFO")
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    try:
        get_logger("test").info(event, **fields)
        handler.flush()
    finally:
        root_logger.removeHandler(handler)
    lines = [line for line in output.getvalue().splitlines() if line]
    return json.loads(lines[-1])


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_configure_development_mode(self) -> None:
        """Pretty-printed output logs without error."""
        configure_logging(development=True)
        get_logger("test").info("carousel_loaded", slides=3)

    def test_reads_environment_variable(self) -> None:
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}):
            configure_logging()
            get_logger("test").info("grid_page_loaded")

    def test_reads_log_level_environment_variable(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(development=True, log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_http_client_loggers(self) -> None:
        """The HTTP client only logs warnings and above."""
        configure_logging(development=True, log_level="DEBUG")
        assert logging.getLogger("aiohttp").level == logging.WARNING
        assert logging.getLogger("aiohttp.client").level == logging.WARNING


class TestProductionJsonOutput:
    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_event_and_fields_are_json(self) -> None:
        parsed = capture_json("search_results_displayed", sequence_id=4, count=8)
        assert parsed["event"] == "search_results_displayed"
        assert parsed["sequence_id"] == 4
        assert parsed["count"] == 8
        assert parsed["level"] == "info"

    def test_bound_context_is_included(self) -> None:
        bind_contextvars(surface="header_search")
        parsed = capture_json("search_query_issued")
        assert parsed["surface"] == "header_search"


class TestGetLogger:
    def setup_method(self) -> None:
        structlog.reset_defaults()
        configure_logging(development=True)

    def test_returns_bound_logger(self) -> None:
        logger = get_logger("fossbox.core.search")
        for method in ("debug", "info", "warning", "error"):
            assert hasattr(logger, method)

    def test_logger_without_name(self) -> None:
        get_logger().info("no name")

    def test_log_with_exception(self) -> None:
        logger = get_logger("test")
        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("grid_load_crashed")
