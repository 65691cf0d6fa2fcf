import pytest

from organicchain.utils.statuses import (
    ACTIVE_DELIVERY_STATUSES,
    COMPLETED_DELIVERY_STATUSES,
    DELIVERY_CHECKPOINT_TYPES,
    CheckpointType,
    OrderStatus,
    order_status_for_checkpoint,
)


@pytest.mark.parametrize(
    "checkpoint_type, expected",
    [
        ("farm_pickup", "picked_up"),
        ("customer_delivery", "delivered"),
        ("warehouse", "in_transit"),
        ("in_transit", "in_transit"),
        ("harvest", "in_transit"),
    ],
)
def test_order_status_for_checkpoint(checkpoint_type, expected):
    assert order_status_for_checkpoint(checkpoint_type) == expected


def test_order_status_for_checkpoint_accepts_enum():
    assert order_status_for_checkpoint(CheckpointType.customer_delivery) == OrderStatus.delivered.value


def test_active_and_completed_sets_are_disjoint():
    assert ACTIVE_DELIVERY_STATUSES == {"confirmed", "picked_up", "in_transit"}
    assert COMPLETED_DELIVERY_STATUSES == {"delivered", "verified"}
    assert not ACTIVE_DELIVERY_STATUSES & COMPLETED_DELIVERY_STATUSES


def test_harvest_is_not_a_delivery_checkpoint():
    assert "harvest" not in DELIVERY_CHECKPOINT_TYPES
    assert DELIVERY_CHECKPOINT_TYPES == {"farm_pickup", "warehouse", "in_transit", "customer_delivery"}
