"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- A mocked dispatcher and a gateway wired to it
- Sample customers, orders and subscriptions
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from dummy_payment_gateway.config import Settings
from dummy_payment_gateway.dispatcher import Dispatcher
from dummy_payment_gateway.gateway import OffsitePaymentGateway
from dummy_payment_gateway.models import (
    BillingPeriod,
    Customer,
    Order,
    OrderItem,
    PaymentMethod,
    Subscription,
)


@pytest.fixture
def dispatcher():
    """Dispatcher mock that records every notification."""
    return MagicMock(spec=Dispatcher)


@pytest.fixture
def test_settings():
    """Settings with the stock fixture values, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def gateway(dispatcher, test_settings):
    """Dummy gateway reporting to the mocked dispatcher."""
    return OffsitePaymentGateway(dispatcher, settings=test_settings)


@pytest.fixture
def customer():
    """Standard test customer."""
    return Customer(customer_id="cus_001", full_name="Test User", email="test@example.com")


@pytest.fixture
def payment_method(customer):
    """Standard test payment method."""
    return PaymentMethod(reference="pm_001", customer_id=customer.customer_id)


@pytest.fixture
def fixed_timestamp():
    """A fixed point in time for deterministic assertions."""
    return datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def order(customer, fixed_timestamp):
    """Order with two line items totalling 125.00."""
    items = [
        OrderItem(description="Seat license", quantity=2, unit_cost=Decimal("50.00")),
        OrderItem(description="Setup fee", quantity=1, unit_cost=Decimal("25.00")),
    ]
    return Order(
        reference="A",
        total=Decimal("125.00"),
        customer=customer,
        timestamp=fixed_timestamp,
        items=items,
    )


@pytest.fixture
def subscription(customer, fixed_timestamp):
    """Monthly subscription that no gateway has seen yet."""
    return Subscription(
        customer=customer,
        reference="SUB-1",
        timestamp=fixed_timestamp,
        period=BillingPeriod.MONTHLY,
        currency="USD",
        amount=99,
    )
