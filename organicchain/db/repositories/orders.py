"""
Order repository functions.

Listing queries eager-load product -> farm so responses can nest them.
"""
from __future__ import annotations

import uuid
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session, joinedload

from organicchain.db import models
from organicchain.utils.statuses import OrderStatus


def _with_product(q):
    return q.options(joinedload(models.Order.product).joinedload(models.Product.farm))


def compute_total_price(quantity: float, price_per_unit: float) -> float:
    """Order total rounded to cents."""
    return round(float(quantity) * float(price_per_unit), 2)


def create_order(
    db: Session,
    *,
    customer_id: uuid.UUID,
    product: models.Product,
    quantity: int,
    delivery_address: str,
) -> models.Order:
    db_order = models.Order(
        customer_id=customer_id,
        product_id=product.id,
        quantity=quantity,
        total_price=compute_total_price(quantity, product.price_per_unit),
        delivery_address=delivery_address,
        status=OrderStatus.pending.value,
    )
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order


def get_order(db: Session, order_id: uuid.UUID) -> Optional[models.Order]:
    return _with_product(db.query(models.Order)).filter(models.Order.id == order_id).first()


def get_orders_for_customer(db: Session, customer_id: uuid.UUID) -> List[models.Order]:
    return (
        _with_product(db.query(models.Order))
        .filter(models.Order.customer_id == customer_id)
        .order_by(models.Order.created_at.desc())
        .all()
    )


def get_orders_for_farmer(db: Session, farmer_id: uuid.UUID, *, status: Optional[str] = None) -> List[models.Order]:
    q = (
        _with_product(db.query(models.Order))
        .join(models.Product, models.Product.id == models.Order.product_id)
        .join(models.Farm, models.Farm.id == models.Product.farm_id)
        .filter(models.Farm.farmer_id == farmer_id)
    )
    if status:
        q = q.filter(models.Order.status == status)
    return q.order_by(models.Order.created_at.desc()).all()


def get_orders_by_status(db: Session, statuses: Iterable[str]) -> List[models.Order]:
    return (
        _with_product(db.query(models.Order))
        .filter(models.Order.status.in_(list(statuses)))
        .order_by(models.Order.created_at.desc())
        .all()
    )


def get_recent_orders(db: Session, limit: int = 10) -> List[models.Order]:
    return _with_product(db.query(models.Order)).order_by(models.Order.created_at.desc()).limit(limit).all()


def count_orders(db: Session, statuses: Optional[Iterable[str]] = None) -> int:
    q = db.query(models.Order)
    if statuses is not None:
        q = q.filter(models.Order.status.in_(list(statuses)))
    return q.count()


def update_order_status(db: Session, order: models.Order, status: str) -> models.Order:
    try:
        order.status = status
        db.commit()
        db.refresh(order)
        return order
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to update status of order {order.id}: {str(e)}")
