"""In-memory dummy payment gateway for exercising billing code in tests."""

from dummy_payment_gateway.dispatcher import Dispatcher, EventDispatcher
from dummy_payment_gateway.gateway import (
    GatewayFactory,
    OffsitePaymentGateway,
    PaymentGateway,
    get_gateway,
)
from dummy_payment_gateway.store import InMemoryStore, Store

__all__ = [
    "Dispatcher",
    "EventDispatcher",
    "GatewayFactory",
    "InMemoryStore",
    "OffsitePaymentGateway",
    "PaymentGateway",
    "Store",
    "get_gateway",
]
