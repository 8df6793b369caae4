"""
Example usage of OffsitePaymentGateway.

Shows how billing code under test can listen for gateway events and how a
test drives those events through the trigger methods.
"""

from datetime import datetime, timezone
from decimal import Decimal

from dummy_payment_gateway import EventDispatcher, OffsitePaymentGateway
from dummy_payment_gateway.dispatcher import (
    ORDER_COMPLETED,
    ORDER_REFUNDED,
    SUBSCRIPTION_REBILLED,
)
from dummy_payment_gateway.logging_config import configure_logging
from dummy_payment_gateway.models import (
    BillingPeriod,
    Customer,
    NotFound,
    Order,
    OrderItem,
    PaymentMethod,
    UnsupportedOperation,
)


def example_orders(gateway: OffsitePaymentGateway, dispatcher: EventDispatcher):
    """Order completion and full refund."""
    print("=== Example 1: Orders and Refunds ===\n")

    dispatcher.listen(
        ORDER_COMPLETED,
        lambda source, order: print(f"Order completed: {order.reference}"),
    )
    dispatcher.listen(
        ORDER_REFUNDED,
        lambda source, order, refund: print(
            f"Order refunded: {refund.reference} for {refund.amount}"
        ),
    )

    order = Order(
        reference="ORD-1001",
        total=Decimal("49.00"),
        items=[OrderItem(description="Pro plan", quantity=1, unit_cost=Decimal("49.00"))],
    )

    gateway.trigger_order_completed(order)
    gateway.trigger_order_refunded(order)

    print(f"Stored refund: {gateway.get_refund_by_reference('ORD-1001-X')}")
    print()


def example_subscriptions(gateway: OffsitePaymentGateway, dispatcher: EventDispatcher):
    """Subscription creation and rebill."""
    print("=== Example 2: Subscriptions ===\n")

    dispatcher.listen(
        SUBSCRIPTION_REBILLED,
        lambda source, subscription, rebill: print(
            f"Rebilled {rebill.subscription_reference}, "
            f"next billing {rebill.next_billing_timestamp:%Y-%m-%d}"
        ),
    )

    customer = Customer(customer_id="cus_42", full_name="Example Customer")
    payment_method = PaymentMethod(reference="pm_42", customer_id=customer.customer_id)

    subscription = gateway.create_subscription(
        customer, payment_method, "Pro", BillingPeriod.MONTHLY
    )
    print(f"Created: {subscription.reference} {subscription.amount} {subscription.currency}")

    gateway.trigger_subscription_activated(subscription)
    gateway.trigger_subscription_rebilled(
        subscription, datetime(2024, 1, 31, tzinfo=timezone.utc)
    )
    print()


def example_failures(gateway: OffsitePaymentGateway):
    """Errors raised by the dummy gateway."""
    print("=== Example 3: Failures ===\n")

    try:
        gateway.get_order_by_reference("ORD-404")
    except NotFound as e:
        print(f"Lookup failed: {e}")

    try:
        gateway.add_payment_method(Customer(customer_id="cus_42"), True)
    except UnsupportedOperation as e:
        print(f"Unsupported: {e}")
    print()


def main():
    """Run all examples."""
    configure_logging()

    print("=" * 60)
    print("OffsitePaymentGateway Usage Examples")
    print("=" * 60)
    print()

    dispatcher = EventDispatcher()
    gateway = OffsitePaymentGateway(dispatcher)

    example_orders(gateway, dispatcher)
    example_subscriptions(gateway, dispatcher)
    example_failures(gateway)

    print("=" * 60)
    print("All examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
