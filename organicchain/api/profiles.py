"""
Profile and role endpoints for the signed-in user.

Role selection replaces the demo role picker of the landing page.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import schemas
from organicchain.db.repositories import users as users_repo
from organicchain.api.deps import get_current_user_context
from organicchain.api.auth import build_user_context
from organicchain.utils.roles import ROLE_DASHBOARDS, SELF_ASSIGNABLE_ROLES

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profiles"])


def role_options() -> List[schemas.RoleOption]:
    return [schemas.RoleOption(role=role, dashboard=path) for role, path in ROLE_DASHBOARDS.items()]


def _me_payload(db: Session, user, current_user) -> schemas.Me:
    profile = users_repo.get_profile(db, user.id)
    return schemas.Me(
        id=user.id,
        email=user.email,
        display_name=user.display_name,
        is_superadmin=bool(user.is_superadmin),
        role=current_user.get("role"),
        dashboard=current_user.get("dashboard"),
        profile=schemas.Profile.model_validate(profile) if profile else None,
    )


@router.get("/roles", response_model=List[schemas.RoleOption])
def list_roles():
    return role_options()


@router.get("/me", response_model=schemas.Me)
def read_me(
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    user, current_user = user_context
    return _me_payload(db, user, current_user)


@router.put("/me/role", response_model=schemas.Me)
def select_role(
    payload: schemas.RoleSelection,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    user, current_user = user_context
    role = payload.role.value
    if role not in SELF_ASSIGNABLE_ROLES and not user.is_superadmin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role is granted by administrators only")
    users_repo.set_role(db, user.id, role)
    logger.info("role_selected: user=%s role=%s", user.email, role)
    current_user = build_user_context(db, user)
    return _me_payload(db, user, current_user)


@router.patch("/me/profile", response_model=schemas.Profile)
def update_my_profile(
    payload: schemas.ProfileUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    user, _ctx = user_context
    changes = payload.model_dump(exclude_unset=True)
    if "full_name" in changes:
        if changes["full_name"] is None or not changes["full_name"].strip():
            raise HTTPException(status_code=422, detail="full_name must not be blank")
        changes["full_name"] = changes["full_name"].strip()
    profile = users_repo.ensure_profile(db, user)
    return users_repo.update_profile(db, profile, changes)
