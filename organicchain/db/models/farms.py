import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Date, ForeignKey, Index, CheckConstraint, Numeric, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Farm(Base):
    __tablename__ = 'farms'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    farmer_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    farm_name = Column(String(255), nullable=False)
    location = Column(Text, nullable=False)
    organic_certified = Column(Boolean, nullable=False, default=False)
    certification_number = Column(String(128), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    products = relationship("Product", back_populates="farm")

    __table_args__ = (
        Index('idx_farms_farmer_id', 'farmer_id'),
    )


class Product(Base):
    __tablename__ = 'products'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    farm_id = Column(UUID(as_uuid=True), ForeignKey('farms.id'), nullable=False)
    product_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    harvest_date = Column(Date, nullable=False)
    pesticide_used = Column(Boolean, nullable=False, default=False)
    pesticide_details = Column(Text, nullable=True)
    quantity = Column(Numeric(12, 3, asdecimal=False), nullable=False)
    unit = Column(String(32), nullable=False, default='kg')
    price_per_unit = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    # JSON text encoded into the product's QR code
    qr_code = Column(Text, nullable=True)
    blockchain_tx_id = Column(String(66), nullable=True)
    status = Column(String(20), nullable=False, default='harvested')
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    farm = relationship("Farm", back_populates="products")
    orders = relationship("Order", back_populates="product")

    __table_args__ = (
        Index('idx_products_farm_id', 'farm_id'),
        Index('idx_products_status', 'status'),
        CheckConstraint("status in ('harvested','in_transit','delivered','verified')", name='ck_products_status'),
        CheckConstraint("quantity > 0", name='ck_products_quantity_positive'),
        CheckConstraint("price_per_unit >= 0", name='ck_products_price_non_negative'),
    )
