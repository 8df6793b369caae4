"""Unit tests for structured logging setup and gateway log events."""

import pytest
import structlog
from structlog.testing import capture_logs

from dummy_payment_gateway.config import settings
from dummy_payment_gateway.logging_config import configure_logging, get_logger


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_renderer(self, reset_structlog):
        configure_logging(log_level="DEBUG", format_as_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.is_configured()

    def test_console_renderer(self, reset_structlog):
        configure_logging(format_as_json=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_defaults_come_from_settings(self, reset_structlog, monkeypatch):
        monkeypatch.setattr(settings, "log_format_json", False)
        monkeypatch.setattr(settings, "log_level", "WARNING")

        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_explicit_arguments_override_settings(self, reset_structlog, monkeypatch):
        monkeypatch.setattr(settings, "log_format_json", False)

        configure_logging(format_as_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_get_logger_returns_usable_logger(self):
        logger = get_logger(__name__)

        assert hasattr(logger, "info")


class TestGatewayLogEvents:
    """Trigger operations emit structured events."""

    def test_refund_logged_with_references(self, gateway, order):
        with capture_logs() as logs:
            gateway.trigger_order_refunded(order)

        refund_logs = [entry for entry in logs if entry["event"] == "order_refunded"]
        assert len(refund_logs) == 1
        assert refund_logs[0]["order_reference"] == "A"
        assert refund_logs[0]["refund_reference"] == "A-X"
        assert refund_logs[0]["log_level"] == "debug"

    def test_subscription_activation_logged(self, gateway, subscription):
        with capture_logs() as logs:
            gateway.trigger_subscription_activated(subscription)

        assert {
            "event": "subscription_activated",
            "subscription_reference": "SUB-1",
            "log_level": "debug",
        } in logs
