import uuid
from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, Index, CheckConstraint, Float, Integer, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class DeliveryCheckpoint(Base):
    __tablename__ = 'delivery_checkpoints'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id'), nullable=False)
    delivery_agent_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    checkpoint_type = Column(String(32), nullable=False)
    location = Column(Text, nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    qr_scanned = Column(Boolean, nullable=False, default=False)
    blockchain_tx_id = Column(String(66), ForeignKey('blockchain_transactions.transaction_id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    order = relationship("Order", back_populates="checkpoints")

    __table_args__ = (
        Index('idx_delivery_checkpoints_order_id', 'order_id'),
        Index('idx_delivery_checkpoints_agent_id_created_at', 'delivery_agent_id', 'created_at'),
        CheckConstraint(
            "checkpoint_type in ('harvest','farm_pickup','warehouse','in_transit','customer_delivery')",
            name='ck_delivery_checkpoints_type',
        ),
    )


class Review(Base):
    __tablename__ = 'reviews'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id'), nullable=False, unique=True)
    customer_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    farmer_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    blockchain_tx_id = Column(String(66), ForeignKey('blockchain_transactions.transaction_id'), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    __table_args__ = (
        Index('idx_reviews_farmer_id', 'farmer_id'),
        CheckConstraint("rating between 1 and 5", name='ck_reviews_rating_range'),
    )
