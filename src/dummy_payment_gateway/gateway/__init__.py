"""
Payment gateway implementations.

- base.PaymentGateway: Abstract interface that all gateways must implement
- offsite.OffsitePaymentGateway: In-memory dummy gateway for tests
- factory: Gateway factory for name-based gateway selection
"""

from dummy_payment_gateway.gateway.base import PaymentGateway
from dummy_payment_gateway.gateway.factory import GatewayFactory, get_gateway
from dummy_payment_gateway.gateway.offsite import OffsitePaymentGateway

__all__ = [
    "PaymentGateway",
    "OffsitePaymentGateway",
    "GatewayFactory",
    "get_gateway",
]
