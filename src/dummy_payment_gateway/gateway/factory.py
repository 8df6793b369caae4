"""
Gateway factory for creating payment gateway instances.

Billing code under test asks for a gateway by name, so a suite can swap the
dummy gateway for another PaymentGateway implementation (a recording wrapper,
a sandbox client) without touching the code it exercises.
"""

from dummy_payment_gateway.config import settings
from dummy_payment_gateway.dispatcher import Dispatcher
from dummy_payment_gateway.gateway.base import PaymentGateway
from dummy_payment_gateway.gateway.offsite import OffsitePaymentGateway
from dummy_payment_gateway.logging_config import get_logger

logger = get_logger(__name__)


class GatewayFactory:
    """Factory for creating payment gateway instances by name."""

    # Registry of available gateways
    _GATEWAYS: dict[str, type[PaymentGateway]] = {
        "dummy": OffsitePaymentGateway,
    }

    @classmethod
    def create_gateway(
        cls,
        gateway_name: str,
        dispatcher: Dispatcher,
    ) -> PaymentGateway:
        """
        Create a payment gateway instance by name.

        Args:
            gateway_name: Name of the gateway (case-insensitive)
            dispatcher: Dispatcher the gateway reports events to

        Returns:
            PaymentGateway instance wired to dispatcher

        Raises:
            ValueError: If gateway_name is not registered

        Examples:
            gateway = GatewayFactory.create_gateway("dummy", EventDispatcher())
        """
        gateway_name_lower = gateway_name.lower()

        if gateway_name_lower not in cls._GATEWAYS:
            available = ", ".join(sorted(cls._GATEWAYS))
            raise ValueError(
                f"Unknown gateway: {gateway_name}. "
                f"Available gateways: {available}"
            )

        gateway_class = cls._GATEWAYS[gateway_name_lower]

        logger.info(
            "gateway_created",
            gateway_name=gateway_name_lower,
            gateway_class=gateway_class.__name__,
        )

        return gateway_class(dispatcher)

    @classmethod
    def register_gateway(
        cls,
        name: str,
        gateway_class: type[PaymentGateway],
    ) -> None:
        """
        Register a new gateway type.

        The class is instantiated with the dispatcher as its only argument.

        Raises:
            TypeError: If gateway_class does not inherit from PaymentGateway
        """
        if not isinstance(gateway_class, type) or not issubclass(
            gateway_class, PaymentGateway
        ):
            raise TypeError(
                f"{getattr(gateway_class, '__name__', gateway_class)} "
                "must inherit from PaymentGateway"
            )

        cls._GATEWAYS[name.lower()] = gateway_class
        logger.info(
            "gateway_registered",
            gateway_name=name.lower(),
            gateway_class=gateway_class.__name__,
        )

    @classmethod
    def unregister_gateway(cls, name: str) -> None:
        cls._GATEWAYS.pop(name.lower(), None)

    @classmethod
    def list_gateways(cls) -> list[str]:
        """Get sorted list of registered gateway names."""
        return sorted(cls._GATEWAYS.keys())


def get_gateway(
    dispatcher: Dispatcher,
    gateway_name: str | None = None,
) -> PaymentGateway:
    """
    Convenience function to create a payment gateway.

    Args:
        dispatcher: Dispatcher the gateway reports events to
        gateway_name: Name of gateway (defaults to settings.default_gateway)
    """
    if gateway_name is None:
        gateway_name = settings.default_gateway

    return GatewayFactory.create_gateway(gateway_name, dispatcher)
