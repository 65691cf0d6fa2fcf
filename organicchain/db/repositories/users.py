"""
User, profile and role repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session

from organicchain.db import models
from organicchain.utils.roles import validate_role


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def get_profile(db: Session, user_id: uuid.UUID) -> Optional[models.Profile]:
    return db.query(models.Profile).filter(models.Profile.user_id == user_id).first()


def ensure_profile(db: Session, user: models.User) -> models.Profile:
    """Return the user's profile, creating one from the display name when missing."""
    profile = get_profile(db, user.id)
    if profile:
        return profile
    profile = models.Profile(
        user_id=user.id,
        full_name=user.display_name or user.email.split("@")[0],
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def update_profile(db: Session, profile: models.Profile, changes: dict) -> models.Profile:
    for key, value in changes.items():
        setattr(profile, key, value)
    db.commit()
    db.refresh(profile)
    return profile


def get_roles(db: Session, user_id: uuid.UUID) -> List[str]:
    rows = db.query(models.UserRole.role).filter(models.UserRole.user_id == user_id).all()
    return [r[0] for r in rows]


def set_role(db: Session, user_id: uuid.UUID, role: str) -> models.UserRole:
    """Replace every role the user holds with ``role``."""
    validate_role(role)
    try:
        db.query(models.UserRole).filter(
            models.UserRole.user_id == user_id,
            models.UserRole.role != role,
        ).delete(synchronize_session=False)
        existing = db.query(models.UserRole).filter(
            models.UserRole.user_id == user_id,
            models.UserRole.role == role,
        ).first()
        if existing is None:
            existing = models.UserRole(user_id=user_id, role=role)
            db.add(existing)
        db.commit()
        db.refresh(existing)
        return existing
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to set role {role} for user {user_id}: {str(e)}")


def add_role(db: Session, user_id: uuid.UUID, role: str) -> models.UserRole:
    """Grant ``role`` without touching other roles; idempotent."""
    validate_role(role)
    existing = db.query(models.UserRole).filter(
        models.UserRole.user_id == user_id,
        models.UserRole.role == role,
    ).first()
    if existing:
        return existing
    db_role = models.UserRole(user_id=user_id, role=role)
    db.add(db_role)
    db.commit()
    db.refresh(db_role)
    return db_role
