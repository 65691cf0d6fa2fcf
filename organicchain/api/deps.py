"""
API dependency helpers.

Provides the dependency-resolved user context and role guards for routes.
"""
import logging
from typing import Optional, Tuple, Dict, Any

from fastapi import Header, HTTPException, status, Depends
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.api.auth import resolve_identity_from_headers, get_or_create_user, build_user_context
from organicchain.utils.roles import role_allows
from organicchain.utils.runtime import dev_mode_active, dev_identity

logger = logging.getLogger("organicchain.auth")

# Contract:
# Returns (sqlalchemy User model, current_user_context_dict)
# Raises 401 if identity cannot be resolved.

def get_current_user_context(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> Tuple[Any, Dict[str, Any]]:
    if dev_mode_active():
        name, email = dev_identity()
    else:
        name, email = resolve_identity_from_headers(
            x_auth_request_user=x_auth_request_user,
            x_auth_request_email=x_auth_request_email,
            x_forwarded_user=x_forwarded_user,
            x_forwarded_email=x_forwarded_email,
        )
        if not email:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    user = get_or_create_user(db, email=email, display_name=name)
    return user, build_user_context(db, user)


def get_current_user_context_or_guest(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
):
    """Return the user context when identity headers are present; otherwise (None, None).

    Used by read endpoints that allow guest access.
    """
    try:
        return get_current_user_context(
            db=db,
            x_auth_request_user=x_auth_request_user,
            x_auth_request_email=x_auth_request_email,
            x_forwarded_user=x_forwarded_user,
            x_forwarded_email=x_forwarded_email,
        )
    except HTTPException as e:
        if e.status_code == status.HTTP_401_UNAUTHORIZED:
            return None, None
        raise


def ensure_role(current_user: Dict[str, Any], *allowed: str) -> None:
    """Raise 403 unless the user's active role is one of ``allowed`` (admin always passes)."""
    role = (current_user or {}).get("role")
    if not role:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Select a role before using this resource")
    if not role_allows(role, allowed):
        logger.warning(
            "role_denied: user=%s role=%s required=%s",
            current_user.get("email"), role, ",".join(sorted(allowed)),
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Role '{role}' cannot access this resource")


def require_role(*allowed: str):
    """Dependency factory: resolve the current user and enforce one of ``allowed`` roles."""

    def _dependency(user_context=Depends(get_current_user_context)):
        _user, current_user = user_context
        ensure_role(current_user, *allowed)
        return user_context

    return _dependency
