"""Order, refund and subscription models handled by the gateway."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from dummy_payment_gateway.models.billing import BillingPeriod, next_billing_timestamp


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class GatewayAware:
    """Mixin for objects that record which gateway issued them."""

    gateway: Any = None

    def set_gateway(self, gateway: Any) -> None:
        self.gateway = gateway


@dataclass
class Customer:
    """Customer placing orders and holding subscriptions."""

    customer_id: str
    full_name: str = ""
    email: str = ""


@dataclass
class PaymentMethod:
    """Stored payment method belonging to a customer."""

    reference: str
    customer_id: str
    is_default: bool = False


@dataclass
class OrderItem:
    """Single line of an order."""

    description: str
    quantity: int = 1
    unit_cost: Decimal | int = 0

    @property
    def total(self) -> Decimal | int:
        return self.quantity * self.unit_cost


@dataclass
class Order:
    """
    Completed order as reported by the payment processor.

    The gateway only requires reference and total; everything else is carried
    along for the benefit of the billing code under test.
    """

    reference: str
    total: Decimal | int = 0
    customer: Customer | None = None
    timestamp: datetime = field(default_factory=utc_now)
    currency: str = "USD"
    items: list[OrderItem] = field(default_factory=list)


@dataclass(eq=False)
class Refund(GatewayAware):
    """Full or partial refund of an order."""

    reference: str
    order_reference: str
    timestamp: datetime
    amount: Decimal | int
    items: list[OrderItem] | None = None
    gateway: Any = None

    def set_items(self, items: list[OrderItem]) -> None:
        self.items = list(items)


@dataclass(eq=False)
class Subscription(GatewayAware):
    """
    Recurring subscription.

    Compared by identity, so a looked-up subscription is the very object that
    was stored.
    """

    customer: Customer | None
    reference: str
    timestamp: datetime
    period: BillingPeriod | str = BillingPeriod.MONTHLY
    currency: str = "USD"
    amount: Decimal | int = 0
    items: list[OrderItem] = field(default_factory=list)
    gateway: Any = None

    def __post_init__(self) -> None:
        # Raises ValueError for unknown periods
        self.period = BillingPeriod(self.period)

    def calculate_next_billing_timestamp(self, timestamp: datetime) -> datetime | None:
        return next_billing_timestamp(self.period, timestamp)
