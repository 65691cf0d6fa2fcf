"""
Farm and product repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from organicchain.db import models, schemas
from organicchain.utils.statuses import ProductStatus


def create_farm(db: Session, farm: schemas.FarmCreate, *, farmer_id: uuid.UUID) -> models.Farm:
    data = farm.model_dump()
    if not data.get("organic_certified"):
        data["certification_number"] = None
    db_farm = models.Farm(**data, farmer_id=farmer_id)
    db.add(db_farm)
    db.commit()
    db.refresh(db_farm)
    return db_farm


def get_farm(db: Session, farm_id: uuid.UUID) -> Optional[models.Farm]:
    return db.query(models.Farm).filter(models.Farm.id == farm_id).first()


def get_farms_for_farmer(db: Session, farmer_id: uuid.UUID) -> List[models.Farm]:
    return (
        db.query(models.Farm)
        .filter(models.Farm.farmer_id == farmer_id)
        .order_by(models.Farm.created_at.desc())
        .all()
    )


def create_product(
    db: Session,
    product: schemas.ProductCreate,
    *,
    product_id: uuid.UUID,
    farm_id: uuid.UUID,
    qr_code: str,
    blockchain_tx_id: str,
) -> models.Product:
    data = product.model_dump()
    if not data.get("pesticide_used"):
        data["pesticide_details"] = None
    db_product = models.Product(
        **data,
        id=product_id,
        farm_id=farm_id,
        qr_code=qr_code,
        blockchain_tx_id=blockchain_tx_id,
        status=ProductStatus.harvested.value,
    )
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product


def get_product(db: Session, product_id: uuid.UUID) -> Optional[models.Product]:
    return (
        db.query(models.Product)
        .options(joinedload(models.Product.farm))
        .filter(models.Product.id == product_id)
        .first()
    )


def get_products_for_farm(db: Session, farm_id: uuid.UUID) -> List[models.Product]:
    return (
        db.query(models.Product)
        .filter(models.Product.farm_id == farm_id)
        .order_by(models.Product.created_at.desc())
        .all()
    )


def count_products_for_farmer(db: Session, farmer_id: uuid.UUID) -> int:
    return (
        db.query(models.Product)
        .join(models.Farm, models.Farm.id == models.Product.farm_id)
        .filter(models.Farm.farmer_id == farmer_id)
        .count()
    )


def get_available_products(db: Session, skip: int = 0, limit: int = 100) -> List[models.Product]:
    """Products still listed for sale, newest first, with their farm loaded."""
    return (
        db.query(models.Product)
        .options(joinedload(models.Product.farm))
        .filter(models.Product.status == ProductStatus.harvested.value)
        .order_by(models.Product.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
