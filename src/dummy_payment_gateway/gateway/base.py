"""Base interface for payment gateways."""

from abc import ABC, abstractmethod
from typing import Any

from dummy_payment_gateway.dispatcher import Dispatcher
from dummy_payment_gateway.models import (
    BillingPeriod,
    Customer,
    Order,
    PaymentMethod,
    Refund,
    Subscription,
)


class PaymentGateway(ABC):
    """
    Abstract base class for payment gateway integrations.

    A gateway answers queries about orders, refunds, subscriptions and
    payment methods, and reports processor-side events to its dispatcher.
    Billing code depends on this interface only, so a dummy gateway can
    replace a real processor integration in tests.
    """

    def __init__(self, dispatcher: Dispatcher | None = None) -> None:
        self._dispatcher = dispatcher

    def get_dispatcher(self) -> Dispatcher:
        """
        Return the dispatcher events are reported to.

        Raises:
            RuntimeError: If no dispatcher has been set
        """
        if self._dispatcher is None:
            raise RuntimeError(f"{type(self).__name__} has no dispatcher set")
        return self._dispatcher

    def set_dispatcher(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    @abstractmethod
    def get_identifier(self) -> str:
        """Short, fixed identifier of the gateway."""
        pass

    @abstractmethod
    def get_our_reference(self) -> str:
        """Reference the gateway uses for the merchant account."""
        pass

    @abstractmethod
    def get_default_payment_method(self, customer_id: str) -> PaymentMethod | None:
        pass

    @abstractmethod
    def list_payment_methods(self, customer_id: str) -> list[PaymentMethod]:
        pass

    @abstractmethod
    def add_payment_method(
        self,
        customer: Customer,
        set_as_default: bool,
        *args: Any,
        **kwargs: Any,
    ) -> PaymentMethod:
        pass

    @abstractmethod
    def get_order_by_reference(self, order_reference: str) -> Order:
        """
        Return the order stored under order_reference.

        Raises:
            NotFound: If the gateway knows no such order
        """
        pass

    @abstractmethod
    def get_refund_by_reference(self, refund_reference: str) -> Refund:
        """
        Return the refund stored under refund_reference.

        Raises:
            NotFound: If the gateway knows no such refund
        """
        pass

    @abstractmethod
    def create_subscription(
        self,
        customer: Customer,
        payment_method: PaymentMethod,
        product_name: str,
        period: BillingPeriod | str,
        *args: Any,
        **kwargs: Any,
    ) -> Subscription:
        """Subscribe customer to product_name, billed every period."""
        pass

    @abstractmethod
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
        """Move an existing subscription to a new product, period or payment method."""
        pass

    @abstractmethod
    def get_subscription_by_reference(self, subscription_reference: str) -> Subscription:
        """
        Return the subscription stored under subscription_reference.

        Raises:
            NotFound: If the gateway knows no such subscription
        """
        pass

    @abstractmethod
    def get_product_id_by_name_and_billing_period(
        self,
        product_name: str,
        period: BillingPeriod | str = BillingPeriod.MONTHLY,
    ) -> str:
        pass
