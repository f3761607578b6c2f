"""Tests for the structured logging helpers."""

import importlib

import structlog
from structlog.testing import capture_logs

from driverlog.utils.logger import (
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)


class TestGetLogger:
    """Tests for get_logger."""

    def test_app_modules_import(self):
        main = importlib.import_module("driverlog.main")

        assert main.app.title == "Driver Daily Log API"

    def test_events_carry_module_name(self):
        log = get_logger("driverlog.tests.logger")

        with capture_logs() as entries:
            log.info("report saved", report_date="2024-03-15")

        assert entries == [
            {
                "event": "report saved",
                "log_level": "info",
                "logger_name": "driverlog.tests.logger",
                "report_date": "2024-03-15",
            }
        ]

    def test_logger_created_before_configuration_uses_it(self):
        log = get_logger("driverlog.tests.early")
        configure_logging(log_level="WARNING")

        with capture_logs() as entries:
            log.info("dropped")
            log.warning("kept")

        assert [e["event"] for e in entries] == ["kept"]
        configure_logging(log_level="INFO")


class TestRequestId:
    """Tests for request id context helpers."""

    def test_set_request_id_binds_context(self):
        set_request_id("req-42")

        assert get_request_id() == "req-42"
        assert structlog.contextvars.get_contextvars() == {"request_id": "req-42"}

        set_request_id(None)

        assert get_request_id() is None
        assert structlog.contextvars.get_contextvars() == {}
