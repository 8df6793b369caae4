"""Domain models for the Dummy Payment Gateway."""

from dummy_payment_gateway.models.billing import BillingPeriod, next_billing_timestamp
from dummy_payment_gateway.models.entities import (
    Customer,
    Order,
    OrderItem,
    PaymentMethod,
    Refund,
    Subscription,
    utc_now,
)
from dummy_payment_gateway.models.events import (
    Cancelation,
    Change,
    FailedPayment,
    Rebill,
    SubscriptionEvent,
)
from dummy_payment_gateway.models.exceptions import (
    GatewayError,
    NotFound,
    UnsupportedOperation,
)

__all__ = [
    "BillingPeriod",
    "Cancelation",
    "Change",
    "Customer",
    "FailedPayment",
    "GatewayError",
    "NotFound",
    "Order",
    "OrderItem",
    "PaymentMethod",
    "Rebill",
    "Refund",
    "Subscription",
    "SubscriptionEvent",
    "UnsupportedOperation",
    "next_billing_timestamp",
    "utc_now",
]
