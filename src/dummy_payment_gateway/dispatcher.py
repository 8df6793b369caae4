"""
Event dispatcher receiving gateway notifications.

The gateway calls exactly one dispatcher method per trigger. Dispatch is a
plain synchronous method call; there is no queue between the gateway and
whatever listens to it.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from dummy_payment_gateway.logging_config import get_logger
from dummy_payment_gateway.models import (
    Cancelation,
    Change,
    FailedPayment,
    Order,
    Rebill,
    Refund,
    Subscription,
)

logger = get_logger(__name__)

ORDER_COMPLETED = "order_completed"
ORDER_REFUNDED = "order_refunded"
ORDER_PARTIALLY_REFUNDED = "order_partially_refunded"
SUBSCRIPTION_ACTIVATED = "subscription_activated"
SUBSCRIPTION_REBILLED = "subscription_rebilled"
SUBSCRIPTION_CHANGED = "subscription_changed"
SUBSCRIPTION_DEACTIVATED = "subscription_deactivated"
SUBSCRIPTION_PAYMENT_FAILED = "subscription_payment_failed"

EVENTS = (
    ORDER_COMPLETED,
    ORDER_REFUNDED,
    ORDER_PARTIALLY_REFUNDED,
    SUBSCRIPTION_ACTIVATED,
    SUBSCRIPTION_REBILLED,
    SUBSCRIPTION_CHANGED,
    SUBSCRIPTION_DEACTIVATED,
    SUBSCRIPTION_PAYMENT_FAILED,
)


class Dispatcher(ABC):
    """
    Abstract receiver of gateway events.

    Every method gets the originating gateway first, followed by the
    entity or event the gateway just recorded.
    """

    @abstractmethod
    def on_order_completed(self, gateway: Any, order: Order) -> None:
        pass

    @abstractmethod
    def on_order_refunded(self, gateway: Any, order: Order, refund: Refund) -> None:
        pass

    @abstractmethod
    def on_order_partially_refunded(
        self, gateway: Any, order: Order, refund: Refund
    ) -> None:
        pass

    @abstractmethod
    def on_subscription_activated(
        self, gateway: Any, subscription: Subscription
    ) -> None:
        pass

    @abstractmethod
    def on_subscription_rebilled(
        self, gateway: Any, subscription: Subscription, rebill: Rebill
    ) -> None:
        pass

    @abstractmethod
    def on_subscription_changed(
        self, gateway: Any, subscription: Subscription, change: Change
    ) -> None:
        pass

    @abstractmethod
    def on_subscription_deactivated(
        self, gateway: Any, subscription: Subscription, cancelation: Cancelation
    ) -> None:
        pass

    @abstractmethod
    def on_subscription_payment_failed(
        self, gateway: Any, subscription: Subscription, failed_payment: FailedPayment
    ) -> None:
        pass


class EventDispatcher(Dispatcher):
    """
    Dispatcher that fans each event out to registered listeners.

    Listeners are called synchronously in registration order with the same
    arguments the gateway passed in. Exceptions raised by a listener
    propagate to the code that fired the trigger.

    Example:
        dispatcher = EventDispatcher()
        dispatcher.listen(ORDER_COMPLETED, lambda gateway, order: seen.append(order))
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    def listen(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register callback for event.

        Raises:
            ValueError: If event is not one of the gateway event names
        """
        if event not in EVENTS:
            available = ", ".join(EVENTS)
            raise ValueError(f"Unknown event: {event}. Available events: {available}")

        self._listeners[event].append(callback)

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._listeners.get(event, []))

    def trigger(self, event: str, *args: Any) -> None:
        callbacks = self._listeners.get(event, [])
        logger.debug("event_dispatched", gateway_event=event, listeners=len(callbacks))

        for callback in list(callbacks):
            callback(*args)

    def on_order_completed(self, gateway: Any, order: Order) -> None:
        self.trigger(ORDER_COMPLETED, gateway, order)

    def on_order_refunded(self, gateway: Any, order: Order, refund: Refund) -> None:
        self.trigger(ORDER_REFUNDED, gateway, order, refund)

    def on_order_partially_refunded(
        self, gateway: Any, order: Order, refund: Refund
    ) -> None:
        self.trigger(ORDER_PARTIALLY_REFUNDED, gateway, order, refund)

    def on_subscription_activated(
        self, gateway: Any, subscription: Subscription
    ) -> None:
        self.trigger(SUBSCRIPTION_ACTIVATED, gateway, subscription)

    def on_subscription_rebilled(
        self, gateway: Any, subscription: Subscription, rebill: Rebill
    ) -> None:
        self.trigger(SUBSCRIPTION_REBILLED, gateway, subscription, rebill)

    def on_subscription_changed(
        self, gateway: Any, subscription: Subscription, change: Change
    ) -> None:
        self.trigger(SUBSCRIPTION_CHANGED, gateway, subscription, change)

    def on_subscription_deactivated(
        self, gateway: Any, subscription: Subscription, cancelation: Cancelation
    ) -> None:
        self.trigger(SUBSCRIPTION_DEACTIVATED, gateway, subscription, cancelation)

    def on_subscription_payment_failed(
        self, gateway: Any, subscription: Subscription, failed_payment: FailedPayment
    ) -> None:
        self.trigger(SUBSCRIPTION_PAYMENT_FAILED, gateway, subscription, failed_payment)
