"""
Delivery checkpoint and review repository functions.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from organicchain.db import models


def create_checkpoint(
    db: Session,
    *,
    order_id: uuid.UUID,
    delivery_agent_id: uuid.UUID,
    checkpoint_type: str,
    location: str,
    notes: Optional[str],
    qr_scanned: bool,
    blockchain_tx_id: str,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> models.DeliveryCheckpoint:
    db_checkpoint = models.DeliveryCheckpoint(
        order_id=order_id,
        delivery_agent_id=delivery_agent_id,
        checkpoint_type=checkpoint_type,
        location=location,
        notes=notes,
        qr_scanned=qr_scanned,
        blockchain_tx_id=blockchain_tx_id,
        latitude=latitude,
        longitude=longitude,
    )
    db.add(db_checkpoint)
    db.commit()
    db.refresh(db_checkpoint)
    return db_checkpoint


def get_checkpoints_for_order(db: Session, order_id: uuid.UUID) -> List[models.DeliveryCheckpoint]:
    return (
        db.query(models.DeliveryCheckpoint)
        .filter(models.DeliveryCheckpoint.order_id == order_id)
        .order_by(models.DeliveryCheckpoint.created_at.asc())
        .all()
    )


def count_checkpoints_since(db: Session, delivery_agent_id: uuid.UUID, since: datetime) -> int:
    return (
        db.query(models.DeliveryCheckpoint)
        .filter(
            models.DeliveryCheckpoint.delivery_agent_id == delivery_agent_id,
            models.DeliveryCheckpoint.created_at >= since,
        )
        .count()
    )


def count_qr_scans(db: Session, delivery_agent_id: uuid.UUID) -> int:
    return (
        db.query(models.DeliveryCheckpoint)
        .filter(
            models.DeliveryCheckpoint.delivery_agent_id == delivery_agent_id,
            models.DeliveryCheckpoint.qr_scanned.is_(True),
        )
        .count()
    )


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


# Reviews
def create_review(
    db: Session,
    *,
    order_id: uuid.UUID,
    customer_id: uuid.UUID,
    farmer_id: uuid.UUID,
    rating: int,
    comment: Optional[str],
    blockchain_tx_id: str,
) -> models.Review:
    db_review = models.Review(
        order_id=order_id,
        customer_id=customer_id,
        farmer_id=farmer_id,
        rating=rating,
        comment=comment,
        blockchain_tx_id=blockchain_tx_id,
    )
    db.add(db_review)
    try:
        db.commit()
    except IntegrityError:
        # reviews.order_id is unique; a concurrent review of the same order lost the race
        db.rollback()
        raise
    db.refresh(db_review)
    return db_review


def get_review_for_order(db: Session, order_id: uuid.UUID) -> Optional[models.Review]:
    return db.query(models.Review).filter(models.Review.order_id == order_id).first()


def get_recent_reviews_with_farmer(db: Session, limit: int = 5):
    """Return (review, farmer_full_name) rows, newest first."""
    return (
        db.query(models.Review, models.Profile.full_name)
        .outerjoin(models.Profile, models.Profile.user_id == models.Review.farmer_id)
        .order_by(models.Review.created_at.desc())
        .limit(limit)
        .all()
    )
