"""Order type and status enumerations."""
from enum import Enum


class OrderType(str, Enum):
    """Fulfilment channel of an order."""

    DELIVERY = "DELIVERY"
    TAKEOUT = "TAKEOUT"
    EAT_IN = "EAT_IN"

    def __str__(self) -> str:
        """Return the string value of the type."""
        return self.value


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    WAITING = "WAITING"  # Placed, waiting for the store to accept
    ACCEPTED = "ACCEPTED"  # Accepted by the store, being prepared
    SERVED = "SERVED"  # Handed over to the guest or the rider
    DELIVERING = "DELIVERING"  # Rider on the way (DELIVERY only)
    DELIVERED = "DELIVERED"  # Rider dropped it off (DELIVERY only)
    COMPLETED = "COMPLETED"

    def __str__(self) -> str:
        """Return the string value of the status."""
        return self.value
