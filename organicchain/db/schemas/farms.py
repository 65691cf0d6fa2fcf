import uuid
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from organicchain.utils.statuses import ProductStatus


class FarmBase(BaseModel):
    farm_name: str
    location: str
    organic_certified: bool = False
    certification_number: str | None = None


class FarmCreate(FarmBase):
    @field_validator("farm_name", "location")
    @classmethod
    def not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped


class Farm(FarmBase):
    id: uuid.UUID
    farmer_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class FarmSummary(BaseModel):
    """Farm columns embedded in product listings."""
    farm_name: str
    location: str | None = None
    organic_certified: bool | None = None
    model_config = ConfigDict(from_attributes=True)


class ProductBase(BaseModel):
    product_name: str
    description: str | None = None
    harvest_date: date = Field(default_factory=date.today)
    pesticide_used: bool = False
    pesticide_details: str | None = None
    quantity: float = Field(gt=0)
    unit: str = "kg"
    price_per_unit: float = Field(ge=0)


class ProductCreate(ProductBase):
    @field_validator("product_name", "unit")
    @classmethod
    def not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped


class Product(ProductBase):
    id: uuid.UUID
    farm_id: uuid.UUID
    qr_code: str | None = None
    blockchain_tx_id: str | None = None
    status: ProductStatus
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ProductWithFarm(Product):
    farm: FarmSummary | None = None


class FarmerDashboard(BaseModel):
    farms: list[Farm]
    selected_farm_id: uuid.UUID | None = None
    products: list[Product]
    total_products: int
    pending_orders: int
