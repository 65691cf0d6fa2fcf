import uuid
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class BlockchainTransaction(BaseModel):
    id: uuid.UUID
    transaction_id: str
    action_type: str
    actor_id: uuid.UUID
    product_id: Optional[uuid.UUID] = None
    order_id: Optional[uuid.UUID] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    metadata: Optional[Dict[str, Any]] = Field(default=None, validation_alias="metadata_json")
    timestamp: datetime
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
