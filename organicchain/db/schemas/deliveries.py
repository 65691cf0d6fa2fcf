import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from organicchain.utils.statuses import CheckpointType, OrderStatus
from .orders import OrderWithProduct


class CheckpointCreate(BaseModel):
    checkpoint_type: CheckpointType = CheckpointType.farm_pickup
    location: str
    notes: str | None = None
    qr_scanned: bool = False
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @field_validator("location")
    @classmethod
    def _location_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Location is required")
        return stripped


class Checkpoint(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    delivery_agent_id: uuid.UUID
    checkpoint_type: CheckpointType
    location: str
    latitude: float | None = None
    longitude: float | None = None
    notes: str | None = None
    qr_scanned: bool
    blockchain_tx_id: str | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CheckpointRecorded(BaseModel):
    checkpoint: Checkpoint
    transaction_id: str
    order_status: OrderStatus
    message: str


class DeliveryStats(BaseModel):
    active_deliveries: int
    todays_checkpoints: int
    qr_scans: int


class DeliveryDashboard(BaseModel):
    orders: list[OrderWithProduct]
    stats: DeliveryStats


class ReviewCreate(BaseModel):
    rating: int = Field(ge=1, le=5)
    comment: str | None = None


class Review(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    customer_id: uuid.UUID
    farmer_id: uuid.UUID
    rating: int
    comment: str | None = None
    blockchain_tx_id: str | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ReviewWithFarmer(Review):
    farmer_name: str | None = None
