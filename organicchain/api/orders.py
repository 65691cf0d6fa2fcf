"""
Customer endpoints.

Placing orders, listing one's own orders, verifying delivered orders and
reviewing them. Each verification/review is recorded as a transaction row.
"""
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import schemas
from organicchain.db.repositories import farms as farms_repo
from organicchain.db.repositories import orders as orders_repo
from organicchain.db.repositories import deliveries as deliveries_repo
from organicchain.api.deps import require_role
from organicchain.api.permissions import can_view_order, is_order_customer
from organicchain.ledger import LedgerAction, record
from organicchain.utils.roles import ROLE_CUSTOMER, ROLE_FARMER, ROLE_DELIVERY_AGENT
from organicchain.utils.statuses import OrderStatus, ProductStatus, COMPLETED_DELIVERY_STATUSES

logger = logging.getLogger(__name__)

router = APIRouter(tags=["customer"])


@router.get("/customer", response_model=schemas.CustomerDashboard)
def customer_dashboard(
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER)),
):
    user, _ctx = user_context
    return schemas.CustomerDashboard(
        products=farms_repo.get_available_products(db),
        orders=orders_repo.get_orders_for_customer(db, user.id),
    )


@router.post("/orders", response_model=schemas.Order, status_code=status.HTTP_201_CREATED)
def place_order(
    payload: schemas.OrderCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER)),
):
    user, _ctx = user_context
    product = farms_repo.get_product(db, payload.product_id)
    if not product or product.status != ProductStatus.harvested.value:
        raise HTTPException(status_code=404, detail="Product not available")
    if payload.quantity > float(product.quantity):
        raise HTTPException(
            status_code=422,
            detail=f"Only {product.quantity:g} {product.unit} available",
        )
    order = orders_repo.create_order(
        db,
        customer_id=user.id,
        product=product,
        quantity=payload.quantity,
        delivery_address=payload.delivery_address,
    )
    logger.info("order_placed: order=%s product=%s total=%.2f", order.id, product.id, order.total_price)
    return order


@router.get("/orders/mine", response_model=List[schemas.OrderWithProduct])
def list_my_orders(
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER)),
):
    user, _ctx = user_context
    return orders_repo.get_orders_for_customer(db, user.id)


@router.get("/orders/{order_id}", response_model=schemas.OrderWithProduct)
def get_order(
    order_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER, ROLE_FARMER, ROLE_DELIVERY_AGENT)),
):
    _user, current_user = user_context
    order = orders_repo.get_order(db, order_id)
    if not order or not can_view_order(order, current_user):
        raise HTTPException(status_code=404, detail="Order not found")
    return order


def _get_customer_order(db: Session, order_id: uuid.UUID, current_user):
    order = orders_repo.get_order(db, order_id)
    if not order or not is_order_customer(order, current_user):
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("/orders/{order_id}/verify", response_model=schemas.Order)
def verify_order(
    order_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER)),
):
    user, current_user = user_context
    order = _get_customer_order(db, order_id, current_user)
    if order.status != OrderStatus.delivered.value:
        raise HTTPException(status_code=409, detail=f"Only delivered orders can be verified (status is {order.status})")
    record(
        db,
        action_type=LedgerAction.VERIFIED,
        actor_id=user.id,
        product_id=order.product_id,
        order_id=order.id,
    )
    return orders_repo.update_order_status(db, order, OrderStatus.verified.value)


@router.post("/orders/{order_id}/reviews", response_model=schemas.Review, status_code=status.HTTP_201_CREATED)
def review_order(
    order_id: uuid.UUID,
    payload: schemas.ReviewCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_CUSTOMER)),
):
    user, current_user = user_context
    order = _get_customer_order(db, order_id, current_user)
    if order.status not in COMPLETED_DELIVERY_STATUSES:
        raise HTTPException(status_code=409, detail="Orders can be reviewed once delivered")
    if deliveries_repo.get_review_for_order(db, order.id):
        raise HTTPException(status_code=409, detail="Order already reviewed")
    tx = record(
        db,
        action_type=LedgerAction.REVIEW,
        actor_id=user.id,
        product_id=order.product_id,
        order_id=order.id,
        metadata={"rating": payload.rating, "comment": payload.comment},
    )
    try:
        review = deliveries_repo.create_review(
            db,
            order_id=order.id,
            customer_id=user.id,
            farmer_id=order.product.farm.farmer_id,
            rating=payload.rating,
            comment=payload.comment,
            blockchain_tx_id=tx.transaction_id,
        )
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Order already reviewed")
    logger.info("order_reviewed: order=%s rating=%d", order.id, payload.rating)
    return review
