import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Index, Float, Text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class BlockchainTransaction(Base):
    """A recorded marketplace event identified by a random hex transaction id.

    Rows are independent; nothing links or hashes one row to another.
    """
    __tablename__ = 'blockchain_transactions'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    transaction_id = Column(String(66), nullable=False, unique=True)
    action_type = Column(Text, nullable=False)
    actor_id = Column(UUID(as_uuid=True), ForeignKey('users.id'), nullable=False)
    product_id = Column(UUID(as_uuid=True), ForeignKey('products.id'), nullable=True)
    order_id = Column(UUID(as_uuid=True), ForeignKey('orders.id'), nullable=True)
    location = Column(Text, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    # Use a non-reserved Python attribute name while keeping DB column name 'metadata'
    metadata_json = Column('metadata', JSONB, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    __table_args__ = (
        Index('ix_blockchain_transactions_product_id_timestamp', 'product_id', 'timestamp'),
        Index('ix_blockchain_transactions_order_id', 'order_id'),
    )
