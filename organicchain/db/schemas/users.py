import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from organicchain.utils.roles import AppRole


class ProfileBase(BaseModel):
    full_name: str
    phone: str | None = None
    address: str | None = None


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(default=None, min_length=1, max_length=120)
    phone: str | None = None
    address: str | None = None


class Profile(ProfileBase):
    id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class RoleSelection(BaseModel):
    role: AppRole


class RoleOption(BaseModel):
    role: AppRole
    dashboard: str


class Me(BaseModel):
    id: uuid.UUID
    email: str
    display_name: str | None = None
    is_superadmin: bool
    role: AppRole | None = None
    dashboard: str | None = None
    profile: Profile | None = None
