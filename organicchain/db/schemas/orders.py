import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from organicchain.utils.statuses import OrderStatus
from .farms import ProductWithFarm


class OrderCreate(BaseModel):
    product_id: uuid.UUID
    quantity: int = Field(default=1, ge=1)
    delivery_address: str

    @field_validator("delivery_address")
    @classmethod
    def _address_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Delivery address is required")
        return stripped


class Order(BaseModel):
    id: uuid.UUID
    customer_id: uuid.UUID
    product_id: uuid.UUID
    quantity: float
    total_price: float
    delivery_address: str
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class OrderFarm(BaseModel):
    farm_name: str
    location: str | None = None
    model_config = ConfigDict(from_attributes=True)


class OrderProduct(BaseModel):
    product_name: str
    qr_code: str | None = None
    farm: OrderFarm | None = None
    model_config = ConfigDict(from_attributes=True)


class OrderWithProduct(Order):
    product: OrderProduct | None = None


class CustomerDashboard(BaseModel):
    products: list[ProductWithFarm]
    orders: list[OrderWithProduct]
