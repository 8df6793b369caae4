"""Billing period model and next-billing date arithmetic."""

import calendar
from datetime import datetime
from enum import Enum


class BillingPeriod(str, Enum):
    """How often a subscription is billed."""

    MONTHLY = "monthly"
    YEARLY = "yearly"
    NONE = "none"


def add_months(timestamp: datetime, months: int) -> datetime:
    """Shift timestamp by whole calendar months, clamping to the month's last day."""
    month_index = timestamp.month - 1 + months
    year = timestamp.year + month_index // 12
    month = month_index % 12 + 1
    day = min(timestamp.day, calendar.monthrange(year, month)[1])
    return timestamp.replace(year=year, month=month, day=day)


def next_billing_timestamp(
    period: BillingPeriod | str,
    timestamp: datetime,
) -> datetime | None:
    """
    Calculate when a subscription billed at timestamp is billed next.

    Args:
        period: Billing period of the subscription
        timestamp: Time of the current billing

    Returns:
        One month or one year after timestamp, or None for BillingPeriod.NONE

    Raises:
        ValueError: If period is not a known billing period
    """
    period = BillingPeriod(period)

    if period == BillingPeriod.MONTHLY:
        return add_months(timestamp, 1)
    elif period == BillingPeriod.YEARLY:
        return add_months(timestamp, 12)
    return None
