"""
Status vocabularies for products, orders and delivery checkpoints.

Also holds the checkpoint -> order status lookup applied when a delivery
agent records a checkpoint.
"""

from enum import Enum
from typing import FrozenSet


class ProductStatus(str, Enum):
    harvested = "harvested"
    in_transit = "in_transit"
    delivered = "delivered"
    verified = "verified"


class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    picked_up = "picked_up"
    in_transit = "in_transit"
    delivered = "delivered"
    verified = "verified"


class CheckpointType(str, Enum):
    harvest = "harvest"
    farm_pickup = "farm_pickup"
    warehouse = "warehouse"
    in_transit = "in_transit"
    customer_delivery = "customer_delivery"


# Orders a delivery agent can still act on
ACTIVE_DELIVERY_STATUSES: FrozenSet[str] = frozenset({
    OrderStatus.confirmed.value,
    OrderStatus.picked_up.value,
    OrderStatus.in_transit.value,
})

COMPLETED_DELIVERY_STATUSES: FrozenSet[str] = frozenset({
    OrderStatus.delivered.value,
    OrderStatus.verified.value,
})

# Checkpoint types offered to delivery agents (harvest is recorded by farmers)
DELIVERY_CHECKPOINT_TYPES: FrozenSet[str] = frozenset({
    CheckpointType.farm_pickup.value,
    CheckpointType.warehouse.value,
    CheckpointType.in_transit.value,
    CheckpointType.customer_delivery.value,
})

_CHECKPOINT_ORDER_STATUS = {
    CheckpointType.farm_pickup.value: OrderStatus.picked_up.value,
    CheckpointType.customer_delivery.value: OrderStatus.delivered.value,
}


def order_status_for_checkpoint(checkpoint_type: str) -> str:
    """Return the order status implied by a recorded checkpoint.

    farm_pickup -> picked_up, customer_delivery -> delivered, anything else -> in_transit.
    """
    key = checkpoint_type.value if isinstance(checkpoint_type, CheckpointType) else str(checkpoint_type)
    return _CHECKPOINT_ORDER_STATUS.get(key, OrderStatus.in_transit.value)
