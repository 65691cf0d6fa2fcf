"""
Initial marketplace schema.

Tables: users, profiles, user_roles, farms, products, orders,
blockchain_transactions, delivery_checkpoints, reviews.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = 'initial_schema_20261018'
down_revision = None
branch_labels = None
depends_on = None


def _uuid_pk():
    return sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        _uuid_pk(),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('is_superadmin', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'profiles',
        _uuid_pk(),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('full_name', sa.Text(), nullable=False),
        sa.Column('phone', sa.Text(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'user_roles',
        _uuid_pk(),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_id_role'),
        sa.CheckConstraint("role in ('admin','farmer','customer','delivery_agent')", name='ck_user_roles_role'),
    )
    op.create_index('idx_user_roles_user_id', 'user_roles', ['user_id'])

    op.create_table(
        'farms',
        _uuid_pk(),
        sa.Column('farmer_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('farm_name', sa.String(255), nullable=False),
        sa.Column('location', sa.Text(), nullable=False),
        sa.Column('organic_certified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('certification_number', sa.String(128), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_farms_farmer_id', 'farms', ['farmer_id'])

    op.create_table(
        'products',
        _uuid_pk(),
        sa.Column('farm_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('farms.id'), nullable=False),
        sa.Column('product_name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('harvest_date', sa.Date(), nullable=False),
        sa.Column('pesticide_used', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('pesticide_details', sa.Text(), nullable=True),
        sa.Column('quantity', sa.Numeric(12, 3), nullable=False),
        sa.Column('unit', sa.String(32), nullable=False, server_default='kg'),
        sa.Column('price_per_unit', sa.Numeric(12, 2), nullable=False),
        sa.Column('qr_code', sa.Text(), nullable=True),
        sa.Column('blockchain_tx_id', sa.String(66), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='harvested'),
        *_timestamps(),
        sa.CheckConstraint("status in ('harvested','in_transit','delivered','verified')", name='ck_products_status'),
        sa.CheckConstraint("quantity > 0", name='ck_products_quantity_positive'),
        sa.CheckConstraint("price_per_unit >= 0", name='ck_products_price_non_negative'),
    )
    op.create_index('idx_products_farm_id', 'products', ['farm_id'])
    op.create_index('idx_products_status', 'products', ['status'])

    op.create_table(
        'orders',
        _uuid_pk(),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('products.id'), nullable=False),
        sa.Column('quantity', sa.Numeric(12, 3), nullable=False),
        sa.Column('total_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('delivery_address', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        *_timestamps(),
        sa.CheckConstraint(
            "status in ('pending','confirmed','picked_up','in_transit','delivered','verified')",
            name='ck_orders_status',
        ),
        sa.CheckConstraint("quantity > 0", name='ck_orders_quantity_positive'),
    )
    op.create_index('idx_orders_customer_id', 'orders', ['customer_id'])
    op.create_index('idx_orders_status', 'orders', ['status'])

    op.create_table(
        'blockchain_transactions',
        _uuid_pk(),
        sa.Column('transaction_id', sa.String(66), nullable=False, unique=True),
        sa.Column('action_type', sa.Text(), nullable=False),
        sa.Column('actor_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('products.id'), nullable=True),
        sa.Column('order_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('orders.id'), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('metadata', postgresql.JSONB(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_blockchain_transactions_product_id_timestamp', 'blockchain_transactions', ['product_id', 'timestamp'])
    op.create_index('ix_blockchain_transactions_order_id', 'blockchain_transactions', ['order_id'])

    op.create_table(
        'delivery_checkpoints',
        _uuid_pk(),
        sa.Column('order_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('delivery_agent_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('checkpoint_type', sa.String(32), nullable=False),
        sa.Column('location', sa.Text(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('qr_scanned', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('blockchain_tx_id', sa.String(66), sa.ForeignKey('blockchain_transactions.transaction_id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "checkpoint_type in ('harvest','farm_pickup','warehouse','in_transit','customer_delivery')",
            name='ck_delivery_checkpoints_type',
        ),
    )
    op.create_index('idx_delivery_checkpoints_order_id', 'delivery_checkpoints', ['order_id'])
    op.create_index('idx_delivery_checkpoints_agent_id_created_at', 'delivery_checkpoints', ['delivery_agent_id', 'created_at'])

    op.create_table(
        'reviews',
        _uuid_pk(),
        sa.Column('order_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('orders.id'), nullable=False, unique=True),
        sa.Column('customer_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('farmer_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('blockchain_tx_id', sa.String(66), sa.ForeignKey('blockchain_transactions.transaction_id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("rating between 1 and 5", name='ck_reviews_rating_range'),
    )
    op.create_index('idx_reviews_farmer_id', 'reviews', ['farmer_id'])


def downgrade() -> None:
    for table in (
        'reviews',
        'delivery_checkpoints',
        'blockchain_transactions',
        'orders',
        'products',
        'farms',
        'user_roles',
        'profiles',
        'users',
    ):
        op.drop_table(table)
