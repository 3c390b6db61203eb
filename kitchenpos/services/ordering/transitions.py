"""Status transition logic for the order lifecycle."""
import logging
from typing import Dict

from kitchenpos.core.exceptions import IllegalStateError
from kitchenpos.db.models import Order
from kitchenpos.services.ordering.statuses import OrderStatus, OrderType

logger = logging.getLogger(__name__)

# Target status -> order type -> the only status it may be reached from.
# A type missing from a row cannot reach that status at all.
PREDECESSORS: Dict[OrderStatus, Dict[OrderType, OrderStatus]] = {
    OrderStatus.ACCEPTED: {
        OrderType.DELIVERY: OrderStatus.WAITING,
        OrderType.TAKEOUT: OrderStatus.WAITING,
        OrderType.EAT_IN: OrderStatus.WAITING,
    },
    OrderStatus.SERVED: {
        OrderType.DELIVERY: OrderStatus.ACCEPTED,
        OrderType.TAKEOUT: OrderStatus.ACCEPTED,
        OrderType.EAT_IN: OrderStatus.ACCEPTED,
    },
    OrderStatus.DELIVERING: {
        OrderType.DELIVERY: OrderStatus.SERVED,
    },
    OrderStatus.DELIVERED: {
        OrderType.DELIVERY: OrderStatus.DELIVERING,
    },
    OrderStatus.COMPLETED: {
        OrderType.DELIVERY: OrderStatus.DELIVERED,
        OrderType.TAKEOUT: OrderStatus.SERVED,
        OrderType.EAT_IN: OrderStatus.SERVED,
    },
}


class StatusTransitionHandler:
    """Moves orders forward through their statuses."""

    @staticmethod
    def check_transition(order: Order, target: OrderStatus) -> None:
        """
        Ensure the order may move to the target status.

        Raises:
            IllegalStateError: The order type never reaches the target, or the
                order is not in the target's predecessor status
        """
        predecessors = PREDECESSORS.get(target, {})
        if order.type not in predecessors:
            raise IllegalStateError(f"{order.type} orders cannot become {target}")

        required = predecessors[order.type]
        if order.status != required:
            raise IllegalStateError(
                f"Order {order.id} must be {required} to become {target}, "
                f"but is {order.status}"
            )

    @staticmethod
    def transition(order: Order, target: OrderStatus) -> None:
        """Check and apply a transition. Modifies order.status in place."""
        StatusTransitionHandler.check_transition(order, target)

        old_status = order.status
        order.status = target
        logger.info(
            f"[STATUS TRANSITION] Order {order.id} ({order.type}): "
            f"{old_status.value} -> {target.value}"
        )
