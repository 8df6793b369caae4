"""Unit tests for gateway factory."""

import pytest

from dummy_payment_gateway.gateway import (
    GatewayFactory,
    OffsitePaymentGateway,
    PaymentGateway,
    get_gateway,
)


class RecordingGateway(OffsitePaymentGateway):
    """Dummy gateway subclass used to test registration."""


@pytest.fixture
def registered_recording_gateway():
    GatewayFactory.register_gateway("Recording", RecordingGateway)
    yield
    GatewayFactory.unregister_gateway("recording")


class TestGatewayFactoryCreation:
    """Tests for creating gateway instances."""

    def test_create_dummy_gateway(self, dispatcher):
        gateway = GatewayFactory.create_gateway("dummy", dispatcher)

        assert isinstance(gateway, OffsitePaymentGateway)
        assert gateway.get_dispatcher() is dispatcher

    def test_create_gateway_case_insensitive(self, dispatcher):
        assert isinstance(GatewayFactory.create_gateway("DUMMY", dispatcher), OffsitePaymentGateway)
        assert isinstance(GatewayFactory.create_gateway("DuMmY", dispatcher), OffsitePaymentGateway)

    def test_create_unknown_gateway_raises_error(self, dispatcher):
        with pytest.raises(ValueError) as exc_info:
            GatewayFactory.create_gateway("unknown_gateway", dispatcher)

        assert "Unknown gateway: unknown_gateway" in str(exc_info.value)
        assert "Available gateways:" in str(exc_info.value)

    def test_get_gateway_defaults_to_dummy(self, dispatcher):
        gateway = get_gateway(dispatcher)

        assert isinstance(gateway, OffsitePaymentGateway)

    def test_get_gateway_by_name(self, dispatcher):
        assert isinstance(get_gateway(dispatcher, "dummy"), OffsitePaymentGateway)


class TestGatewayFactoryRegistry:
    """Tests for gateway registration."""

    def test_list_gateways(self):
        gateways = GatewayFactory.list_gateways()

        assert "dummy" in gateways
        assert gateways == sorted(gateways)

    def test_register_new_gateway(self, registered_recording_gateway, dispatcher):
        assert "recording" in GatewayFactory.list_gateways()

        gateway = GatewayFactory.create_gateway("recording", dispatcher)

        assert isinstance(gateway, RecordingGateway)
        assert isinstance(gateway, PaymentGateway)

    def test_register_non_gateway_raises_type_error(self):
        class NotAGateway:
            pass

        with pytest.raises(TypeError) as exc_info:
            GatewayFactory.register_gateway("invalid", NotAGateway)

        assert "must inherit from PaymentGateway" in str(exc_info.value)
        assert "invalid" not in GatewayFactory.list_gateways()

    def test_unregister_unknown_is_noop(self):
        GatewayFactory.unregister_gateway("never-registered")

        assert "dummy" in GatewayFactory.list_gateways()
