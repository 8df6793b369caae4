"""Unit tests for billing period arithmetic."""

from datetime import datetime, timezone

import pytest

from dummy_payment_gateway.models import BillingPeriod, Subscription, next_billing_timestamp
from dummy_payment_gateway.models.billing import add_months


class TestAddMonths:
    """Tests for calendar month arithmetic."""

    @pytest.mark.parametrize(
        "start, months, expected",
        [
            (datetime(2024, 1, 15), 1, datetime(2024, 2, 15)),
            (datetime(2024, 1, 31), 1, datetime(2024, 2, 29)),
            (datetime(2023, 1, 31), 1, datetime(2023, 2, 28)),
            (datetime(2024, 12, 10), 1, datetime(2025, 1, 10)),
            (datetime(2024, 2, 29), 12, datetime(2025, 2, 28)),
            (datetime(2024, 3, 31), 1, datetime(2024, 4, 30)),
        ],
    )
    def test_add_months(self, start, months, expected):
        assert add_months(start, months) == expected

    def test_preserves_time_and_timezone(self):
        start = datetime(2024, 5, 3, 8, 30, tzinfo=timezone.utc)

        result = add_months(start, 1)

        assert result == datetime(2024, 6, 3, 8, 30, tzinfo=timezone.utc)


class TestNextBillingTimestamp:
    """Tests for next billing calculation per period."""

    def test_monthly(self):
        assert next_billing_timestamp(BillingPeriod.MONTHLY, datetime(2024, 1, 1)) == datetime(
            2024, 2, 1
        )

    def test_yearly(self):
        assert next_billing_timestamp("yearly", datetime(2024, 1, 1)) == datetime(2025, 1, 1)

    def test_none_period_has_no_next_billing(self):
        assert next_billing_timestamp(BillingPeriod.NONE, datetime(2024, 1, 1)) is None

    def test_unknown_period_raises(self):
        with pytest.raises(ValueError):
            next_billing_timestamp("weekly", datetime(2024, 1, 1))

    def test_subscription_uses_its_period(self, customer):
        subscription = Subscription(
            customer=customer,
            reference="SUB-Y",
            timestamp=datetime(2024, 1, 1),
            period=BillingPeriod.YEARLY,
        )

        assert subscription.calculate_next_billing_timestamp(
            datetime(2024, 6, 1)
        ) == datetime(2025, 6, 1)
