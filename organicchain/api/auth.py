"""
Authentication helpers and identity resolution.

Parses proxy headers, normalizes emails, and upserts users (with their
profile) while supporting admin elevation via environment configuration.
"""
import logging
import os
from typing import Optional, Dict, Any, Tuple
from sqlalchemy.orm import Session

from organicchain.db import models
from organicchain.db.repositories import users as users_repo
from organicchain.utils.roles import ROLE_ADMIN, dashboard_for_role, primary_role

logger = logging.getLogger("organicchain.auth")


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    email = email.strip().lower()
    return email or None


def _normalize_list_env(var_name: str) -> set:
    raw = os.getenv(var_name, "")
    values = set()
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned.lower())
    return values


def _admin_emails() -> set:
    return _normalize_list_env("ADMIN_EMAILS")


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def get_or_create_user(db: Session, email: str, display_name: Optional[str] = None) -> models.User:
    user = users_repo.get_user_by_email(db, email)
    if not user:
        user = models.User(
            email=email,
            display_name=display_name or email.split("@")[0],
            is_superadmin=email in _admin_emails(),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("user_created: email=%s superadmin=%s", email, user.is_superadmin)
        if user.is_superadmin:
            users_repo.add_role(db, user.id, ROLE_ADMIN)
    elif email in _admin_emails() and not user.is_superadmin:
        # Existing users might predate a new ADMIN_EMAILS value; promote them.
        user.is_superadmin = True
        db.commit()
        db.refresh(user)
        logger.info("user_promoted: email=%s", email)
        users_repo.add_role(db, user.id, ROLE_ADMIN)

    users_repo.ensure_profile(db, user)
    return user


def build_user_context(db: Session, user: models.User) -> Dict[str, Any]:
    """Return the request-scoped view of a user used by permission helpers."""
    roles = users_repo.get_roles(db, user.id)
    role = primary_role(roles)
    return {
        "id": user.id,
        "email": user.email,
        "display_name": user.display_name,
        "is_superadmin": bool(user.is_superadmin),
        "roles": roles,
        "role": role,
        "dashboard": dashboard_for_role(role),
    }
