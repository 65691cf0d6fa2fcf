import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Index, CheckConstraint, Numeric, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Order(Base):
    __tablename__ = 'orders'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    product_id = Column(UUID(as_uuid=True), ForeignKey('products.id'), nullable=False)
    quantity = Column(Numeric(12, 3, asdecimal=False), nullable=False)
    total_price = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    delivery_address = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default='pending')
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    product = relationship("Product", back_populates="orders")
    checkpoints = relationship("DeliveryCheckpoint", back_populates="order", order_by="DeliveryCheckpoint.created_at")

    __table_args__ = (
        Index('idx_orders_customer_id', 'customer_id'),
        Index('idx_orders_status', 'status'),
        CheckConstraint(
            "status in ('pending','confirmed','picked_up','in_transit','delivered','verified')",
            name='ck_orders_status',
        ),
        CheckConstraint("quantity > 0", name='ck_orders_quantity_positive'),
    )
