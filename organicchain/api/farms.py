"""
Farmer endpoints.

Farms, harvested product listings (each recorded as a "harvest"
transaction with a QR payload), and confirmation of incoming orders.
"""
import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import models, schemas
from organicchain.db.repositories import farms as farms_repo
from organicchain.db.repositories import orders as orders_repo
from organicchain.api.deps import require_role
from organicchain.api.permissions import owns_farm, owns_product
from organicchain.ledger import LedgerAction, record
from organicchain.utils.roles import ROLE_FARMER
from organicchain.utils.statuses import OrderStatus
from organicchain.utils.tx_ids import generate_blockchain_tx_id, generate_qr_data

logger = logging.getLogger(__name__)

router = APIRouter(tags=["farmer"])


def _get_owned_farm(db: Session, farm_id: uuid.UUID, current_user) -> models.Farm:
    farm = farms_repo.get_farm(db, farm_id)
    # Foreign farms are reported as missing
    if not farm or not owns_farm(farm, current_user):
        raise HTTPException(status_code=404, detail="Farm not found")
    return farm


@router.get("/farmer", response_model=schemas.FarmerDashboard)
def farmer_dashboard(
    farm_id: Optional[uuid.UUID] = None,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    user, current_user = user_context
    farms = farms_repo.get_farms_for_farmer(db, user.id)
    selected = None
    if farm_id is not None:
        selected = _get_owned_farm(db, farm_id, current_user)
    elif farms:
        selected = farms[0]
    products = farms_repo.get_products_for_farm(db, selected.id) if selected else []
    pending = orders_repo.get_orders_for_farmer(db, user.id, status=OrderStatus.pending.value)
    return schemas.FarmerDashboard(
        farms=farms,
        selected_farm_id=selected.id if selected else None,
        products=products,
        total_products=farms_repo.count_products_for_farmer(db, user.id),
        pending_orders=len(pending),
    )


@router.post("/farms", response_model=schemas.Farm, status_code=status.HTTP_201_CREATED)
def create_farm(
    farm: schemas.FarmCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    user, _ctx = user_context
    created = farms_repo.create_farm(db, farm, farmer_id=user.id)
    logger.info("farm_created: farm=%s farmer=%s", created.id, user.email)
    return created


@router.get("/farms", response_model=List[schemas.Farm])
def list_my_farms(
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    user, _ctx = user_context
    return farms_repo.get_farms_for_farmer(db, user.id)


@router.post("/farms/{farm_id}/products", response_model=schemas.Product, status_code=status.HTTP_201_CREATED)
def add_product(
    farm_id: uuid.UUID,
    product: schemas.ProductCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    user, current_user = user_context
    farm = _get_owned_farm(db, farm_id, current_user)

    tx_id = generate_blockchain_tx_id()
    product_id = uuid.uuid4()
    created = farms_repo.create_product(
        db,
        product,
        product_id=product_id,
        farm_id=farm.id,
        qr_code=generate_qr_data(product_id, tx_id),
        blockchain_tx_id=tx_id,
    )
    record(
        db,
        transaction_id=tx_id,
        action_type=LedgerAction.HARVEST,
        actor_id=user.id,
        product_id=created.id,
        metadata=product.model_dump(mode="json"),
    )
    logger.info("product_added: product=%s farm=%s", created.id, farm.id)
    return created


@router.get("/farms/{farm_id}/products", response_model=List[schemas.Product])
def list_farm_products(
    farm_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    _user, current_user = user_context
    farm = _get_owned_farm(db, farm_id, current_user)
    return farms_repo.get_products_for_farm(db, farm.id)


@router.get("/farmer/orders", response_model=List[schemas.OrderWithProduct])
def list_incoming_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    user, _ctx = user_context
    return orders_repo.get_orders_for_farmer(
        db, user.id, status=status_filter.value if status_filter else None
    )


@router.post("/orders/{order_id}/confirm", response_model=schemas.Order)
def confirm_order(
    order_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_FARMER)),
):
    user, current_user = user_context
    order = orders_repo.get_order(db, order_id)
    if not order or not owns_product(order.product, current_user):
        raise HTTPException(status_code=404, detail="Order not found")
    if order.status != OrderStatus.pending.value:
        raise HTTPException(status_code=409, detail=f"Only pending orders can be confirmed (status is {order.status})")
    record(
        db,
        action_type=LedgerAction.ORDER_CONFIRMED,
        actor_id=user.id,
        product_id=order.product_id,
        order_id=order.id,
    )
    order = orders_repo.update_order_status(db, order, OrderStatus.confirmed.value)
    logger.info("order_confirmed: order=%s farmer=%s", order.id, user.email)
    return order
