"""
Blockchain transaction repository functions.
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from organicchain.db import models


def create_transaction(
    db: Session,
    *,
    transaction_id: str,
    action_type: str,
    actor_id: uuid.UUID,
    product_id: Optional[uuid.UUID] = None,
    order_id: Optional[uuid.UUID] = None,
    location: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> models.BlockchainTransaction:
    db_tx = models.BlockchainTransaction(
        transaction_id=transaction_id,
        action_type=action_type,
        actor_id=actor_id,
        product_id=product_id,
        order_id=order_id,
        location=location,
        latitude=latitude,
        longitude=longitude,
        metadata_json=metadata,
    )
    db.add(db_tx)
    db.commit()
    db.refresh(db_tx)
    return db_tx


def get_transaction(db: Session, transaction_id: str) -> Optional[models.BlockchainTransaction]:
    return (
        db.query(models.BlockchainTransaction)
        .filter(models.BlockchainTransaction.transaction_id == transaction_id)
        .first()
    )


def get_transactions(
    db: Session,
    *,
    product_id: Optional[uuid.UUID] = None,
    order_id: Optional[uuid.UUID] = None,
    skip: int = 0,
    limit: int = 100,
) -> List[models.BlockchainTransaction]:
    q = db.query(models.BlockchainTransaction)
    if product_id:
        q = q.filter(models.BlockchainTransaction.product_id == product_id)
    if order_id:
        q = q.filter(models.BlockchainTransaction.order_id == order_id)
    return q.order_by(models.BlockchainTransaction.timestamp.desc()).offset(skip).limit(limit).all()


def count_transactions(db: Session) -> int:
    return db.query(models.BlockchainTransaction).count()
