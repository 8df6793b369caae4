"""Subscription side-events handed to the dispatcher.

These are built fresh for every trigger call and are never stored.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from dummy_payment_gateway.models.entities import GatewayAware


@dataclass(eq=False)
class SubscriptionEvent(GatewayAware):
    """Base for events that happen to an existing subscription."""

    subscription_reference: str
    timestamp: datetime
    gateway: Any = None


@dataclass(eq=False)
class Rebill(SubscriptionEvent):
    """Subscription was charged for another billing period."""

    next_billing_timestamp: datetime | None = None


@dataclass(eq=False)
class Change(SubscriptionEvent):
    """Subscription plan or billing details changed."""


@dataclass(eq=False)
class Cancelation(SubscriptionEvent):
    """Subscription was canceled."""


@dataclass(eq=False)
class FailedPayment(SubscriptionEvent):
    """Charging the subscription failed."""
