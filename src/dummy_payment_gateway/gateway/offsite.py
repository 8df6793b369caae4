"""
Dummy offsite payment gateway for tests.

OffsitePaymentGateway implements the PaymentGateway interface without talking
to any processor. Queries return canned values or whatever earlier trigger
calls stored; trigger_* methods play the part of the processor reporting an
event: they upsert the affected entity and then make exactly one call on the
dispatcher.

REFUND REFERENCES:
Refunds are keyed "<order reference>-X". Refunding the same order twice
(fully or partially) therefore replaces the earlier refund in the store
instead of adding a second one.
"""

from datetime import datetime
from typing import Any

from dummy_payment_gateway.config import Settings, settings as default_settings
from dummy_payment_gateway.dispatcher import Dispatcher
from dummy_payment_gateway.gateway.base import PaymentGateway
from dummy_payment_gateway.logging_config import get_logger
from dummy_payment_gateway.models import (
    BillingPeriod,
    Cancelation,
    Change,
    Customer,
    FailedPayment,
    NotFound,
    Order,
    OrderItem,
    PaymentMethod,
    Rebill,
    Refund,
    Subscription,
    UnsupportedOperation,
    utc_now,
)
from dummy_payment_gateway.store import InMemoryStore, Store

logger = get_logger(__name__)

# Dummy Offsite Payment Gateway
IDENTIFIER = "dopg"


class OffsitePaymentGateway(PaymentGateway):
    """
    In-memory payment gateway that reports events to an injected dispatcher.

    Args:
        dispatcher: Receiver of every trigger notification (required)
        orders: Store for orders, defaults to a fresh InMemoryStore
        refunds: Store for refunds, defaults to a fresh InMemoryStore
        subscriptions: Store for subscriptions, defaults to a fresh InMemoryStore
        settings: Fixture values, defaults to the global settings
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        orders: Store | None = None,
        refunds: Store | None = None,
        subscriptions: Store | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(dispatcher)

        self.orders = orders if orders is not None else InMemoryStore()
        self.refunds = refunds if refunds is not None else InMemoryStore()
        self.subscriptions = (
            subscriptions if subscriptions is not None else InMemoryStore()
        )
        self.settings = settings or default_settings

        logger.info(
            "dummy_gateway_initialized",
            identifier=self.get_identifier(),
            dispatcher=type(dispatcher).__name__,
        )

    def get_identifier(self) -> str:
        return IDENTIFIER

    def get_our_reference(self) -> str:
        return self.get_identifier()

    def get_default_payment_method(self, customer_id: str) -> PaymentMethod | None:
        return None

    def list_payment_methods(self, customer_id: str) -> list[PaymentMethod]:
        return []

    def add_payment_method(
        self,
        customer: Customer,
        set_as_default: bool,
        *args: Any,
        **kwargs: Any,
    ) -> PaymentMethod:
        raise UnsupportedOperation(
            f"{type(self).__name__}.add_payment_method() is not implemented"
        )

    def get_order_by_reference(self, order_reference: str) -> Order:
        return self._lookup(self.orders, "Order", order_reference)

    def get_refund_by_reference(self, refund_reference: str) -> Refund:
        return self._lookup(self.refunds, "Refund", refund_reference)

    def get_subscription_by_reference(self, subscription_reference: str) -> Subscription:
        return self._lookup(self.subscriptions, "Subscription", subscription_reference)

    def create_subscription(
        self,
        customer: Customer,
        payment_method: PaymentMethod,
        product_name: str,
        period: BillingPeriod | str,
        *args: Any,
        **kwargs: Any,
    ) -> Subscription:
        """
        Return a canned subscription for customer.

        Only customer and period are used. Reference, currency and amount
        come from settings.subscription and do not depend on the product or
        payment method.
        """
        fixture = self.settings.subscription

        return Subscription(
            customer=customer,
            reference=fixture.reference,
            timestamp=utc_now(),
            period=period,
            currency=fixture.currency,
            amount=fixture.amount,
            items=[],
        )

    def update_subscription(
        self,
        subscription: Subscription,
        customer: Customer,
        payment_method: PaymentMethod,
        product_name: str,
        period: BillingPeriod | str,
        *args: Any,
        **kwargs: Any,
    ) -> Subscription:
        return subscription

    def get_product_id_by_name_and_billing_period(
        self,
        product_name: str,
        period: BillingPeriod | str = BillingPeriod.MONTHLY,
    ) -> str:
        return ""

    def trigger_order_completed(self, order: Order) -> None:
        """Simulate the processor reporting a completed order."""
        self.orders.put(order.reference, order)

        logger.debug("order_completed", order_reference=order.reference)

        self.get_dispatcher().on_order_completed(self, order)

    def trigger_order_refunded(
        self,
        order: Order,
        timestamp: datetime | None = None,
    ) -> None:
        """Simulate a full refund of order; the refund amount is the order total."""
        self.orders.put(order.reference, order)

        refund = self._build_refund(order, order.total, timestamp)
        self.refunds.put(refund.reference, refund)

        logger.debug(
            "order_refunded",
            order_reference=order.reference,
            refund_reference=refund.reference,
            amount=str(refund.amount),
        )

        self.get_dispatcher().on_order_refunded(self, order, refund)

    def trigger_order_partially_refunded(
        self,
        order: Order,
        items: list[OrderItem] | None = None,
        timestamp: datetime | None = None,
    ) -> None:
        """
        Simulate a partial refund of order.

        The refund amount is the fixed settings.refund.partial_amount; items,
        when given, are recorded on the refund but do not affect the amount.
        """
        self.orders.put(order.reference, order)

        refund = self._build_refund(
            order, self.settings.refund.partial_amount, timestamp
        )
        if items:
            refund.set_items(items)

        self.refunds.put(refund.reference, refund)

        logger.debug(
            "order_partially_refunded",
            order_reference=order.reference,
            refund_reference=refund.reference,
            items=len(items or []),
        )

        self.get_dispatcher().on_order_partially_refunded(self, order, refund)

    def trigger_subscription_activated(self, subscription: Subscription) -> None:
        self._claim_subscription(subscription)

        logger.debug(
            "subscription_activated", subscription_reference=subscription.reference
        )

        self.get_dispatcher().on_subscription_activated(self, subscription)

    def trigger_subscription_rebilled(
        self,
        subscription: Subscription,
        timestamp: datetime | None = None,
        next_billing_timestamp: datetime | None = None,
    ) -> None:
        """
        Simulate a successful recurring charge.

        When next_billing_timestamp is omitted it is calculated from the
        subscription's billing period, starting at timestamp. The rebill is
        built before the subscription is stored, so a failure leaves the
        store untouched.
        """
        if timestamp is None:
            timestamp = utc_now()

        if next_billing_timestamp is None:
            next_billing_timestamp = subscription.calculate_next_billing_timestamp(
                timestamp
            )

        rebill = Rebill(
            subscription_reference=subscription.reference,
            timestamp=timestamp,
            next_billing_timestamp=next_billing_timestamp,
        )
        rebill.set_gateway(self)

        self._claim_subscription(subscription)

        logger.debug(
            "subscription_rebilled",
            subscription_reference=subscription.reference,
            next_billing_timestamp=(
                next_billing_timestamp.isoformat() if next_billing_timestamp else None
            ),
        )

        self.get_dispatcher().on_subscription_rebilled(self, subscription, rebill)

    def trigger_subscription_changed(
        self,
        subscription: Subscription,
        timestamp: datetime | None = None,
    ) -> None:
        self._claim_subscription(subscription)

        change = Change(
            subscription_reference=subscription.reference,
            timestamp=timestamp if timestamp is not None else utc_now(),
        )
        change.set_gateway(self)

        logger.debug("subscription_changed", subscription_reference=subscription.reference)

        self.get_dispatcher().on_subscription_changed(self, subscription, change)

    def trigger_subscription_deactivated(
        self,
        subscription: Subscription,
        timestamp: datetime | None = None,
    ) -> None:
        self._claim_subscription(subscription)

        cancelation = Cancelation(
            subscription_reference=subscription.reference,
            timestamp=timestamp if timestamp is not None else utc_now(),
        )
        cancelation.set_gateway(self)

        logger.debug(
            "subscription_deactivated", subscription_reference=subscription.reference
        )

        self.get_dispatcher().on_subscription_deactivated(
            self, subscription, cancelation
        )

    def trigger_subscription_failed_payment(
        self,
        subscription: Subscription,
        timestamp: datetime | None = None,
    ) -> None:
        self._claim_subscription(subscription)

        failed_payment = FailedPayment(
            subscription_reference=subscription.reference,
            timestamp=timestamp if timestamp is not None else utc_now(),
        )
        failed_payment.set_gateway(self)

        logger.debug(
            "subscription_payment_failed",
            subscription_reference=subscription.reference,
        )

        self.get_dispatcher().on_subscription_payment_failed(
            self, subscription, failed_payment
        )

    def register_subscription(self, subscription: Subscription) -> None:
        """Store subscription under its reference without notifying the dispatcher."""
        self.subscriptions.put(subscription.reference, subscription)

    def _claim_subscription(self, subscription: Subscription) -> None:
        subscription.set_gateway(self)
        self.register_subscription(subscription)

    def _build_refund(
        self,
        order: Order,
        amount: Any,
        timestamp: datetime | None,
    ) -> Refund:
        refund = Refund(
            reference=f"{order.reference}{self.settings.refund.reference_suffix}",
            order_reference=order.reference,
            timestamp=timestamp if timestamp is not None else utc_now(),
            amount=amount,
        )
        refund.set_gateway(self)
        return refund

    @staticmethod
    def _lookup(store: Store, entity_kind: str, reference: str) -> Any:
        if store.contains(reference):
            return store.get(reference)

        raise NotFound(entity_kind, reference)
