"""
Delivery agent endpoints.

Agents list orders that are ready for or already in delivery and record
checkpoints. Every checkpoint writes a transaction row first, then the
checkpoint referencing it, then advances the order status.
"""
import logging
import uuid
from datetime import datetime, UTC
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import schemas
from organicchain.db.repositories import orders as orders_repo
from organicchain.db.repositories import deliveries as deliveries_repo
from organicchain.api.deps import require_role
from organicchain.api.permissions import can_view_order
from organicchain.ledger import record
from organicchain.utils.roles import ROLE_CUSTOMER, ROLE_DELIVERY_AGENT, ROLE_FARMER
from organicchain.utils.statuses import (
    ACTIVE_DELIVERY_STATUSES,
    DELIVERY_CHECKPOINT_TYPES,
    order_status_for_checkpoint,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["delivery"])


@router.get("/deliveries", response_model=List[schemas.OrderWithProduct])
def list_deliveries(
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_DELIVERY_AGENT)),
):
    return orders_repo.get_orders_by_status(db, ACTIVE_DELIVERY_STATUSES)


@router.get("/delivery", response_model=schemas.DeliveryDashboard)
def delivery_dashboard(
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_DELIVERY_AGENT)),
):
    user, _ctx = user_context
    orders = orders_repo.get_orders_by_status(db, ACTIVE_DELIVERY_STATUSES)
    midnight = deliveries_repo.start_of_day(datetime.now(UTC))
    stats = schemas.DeliveryStats(
        active_deliveries=len(orders),
        todays_checkpoints=deliveries_repo.count_checkpoints_since(db, user.id, midnight),
        qr_scans=deliveries_repo.count_qr_scans(db, user.id),
    )
    return schemas.DeliveryDashboard(orders=orders, stats=stats)


@router.post(
    "/orders/{order_id}/checkpoints",
    response_model=schemas.CheckpointRecorded,
    status_code=status.HTTP_201_CREATED,
)
def record_checkpoint(
    order_id: uuid.UUID,
    payload: schemas.CheckpointCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_DELIVERY_AGENT)),
):
    user, _ctx = user_context
    checkpoint_type = payload.checkpoint_type.value
    if checkpoint_type not in DELIVERY_CHECKPOINT_TYPES:
        raise HTTPException(status_code=422, detail=f"Checkpoint type '{checkpoint_type}' is not a delivery checkpoint")
    order = orders_repo.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    if order.status not in ACTIVE_DELIVERY_STATUSES:
        raise HTTPException(status_code=409, detail=f"Order is not in delivery (status is {order.status})")

    tx = record(
        db,
        action_type=checkpoint_type,
        actor_id=user.id,
        product_id=order.product_id,
        order_id=order.id,
        location=payload.location,
        latitude=payload.latitude,
        longitude=payload.longitude,
        metadata={"notes": payload.notes},
    )
    checkpoint = deliveries_repo.create_checkpoint(
        db,
        order_id=order.id,
        delivery_agent_id=user.id,
        checkpoint_type=checkpoint_type,
        location=payload.location,
        notes=payload.notes,
        qr_scanned=payload.qr_scanned,
        blockchain_tx_id=tx.transaction_id,
        latitude=payload.latitude,
        longitude=payload.longitude,
    )
    new_status = order_status_for_checkpoint(checkpoint_type)
    orders_repo.update_order_status(db, order, new_status)
    logger.info("checkpoint_recorded: order=%s type=%s status=%s", order.id, checkpoint_type, new_status)
    return schemas.CheckpointRecorded(
        checkpoint=checkpoint,
        transaction_id=tx.transaction_id,
        order_status=new_status,
        message=f"Checkpoint recorded on blockchain: {tx.transaction_id}",
    )


@router.get("/orders/{order_id}/checkpoints", response_model=List[schemas.Checkpoint])
def list_checkpoints(
    order_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER, ROLE_FARMER, ROLE_DELIVERY_AGENT)),
):
    _user, current_user = user_context
    order = orders_repo.get_order(db, order_id)
    if not order or not can_view_order(order, current_user):
        raise HTTPException(status_code=404, detail="Order not found")
    return deliveries_repo.get_checkpoints_for_order(db, order.id)
