"""Custom exceptions for the Dummy Payment Gateway."""


class GatewayError(Exception):
    """Base exception for gateway-related errors."""

    pass


class NotFound(GatewayError, LookupError):
    """
    Raised when a lookup by reference finds nothing in the gateway's stores.

    Lookups are exact and case-sensitive. The message names the entity kind
    and the missing reference, e.g. "Order #A-1 not found".
    """

    def __init__(self, entity_kind: str, reference: str) -> None:
        self.entity_kind = entity_kind
        self.reference = reference
        super().__init__(f"{entity_kind} #{reference} not found")


class UnsupportedOperation(GatewayError, NotImplementedError):
    """
    Raised by operations the dummy gateway deliberately does not implement.

    Callers can rely on this to exercise their handling of an unsupported
    gateway capability.
    """

    pass
