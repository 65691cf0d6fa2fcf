"""
Domain-split Pydantic schemas.

Re-exports every request/response model under `organicchain.db.schemas`.
"""

# Import order: define base/simple types first to satisfy forward refs
from .users import Profile, ProfileBase, ProfileUpdate, RoleSelection, RoleOption, Me
from .farms import (
    FarmBase,
    FarmCreate,
    Farm,
    FarmSummary,
    ProductBase,
    ProductCreate,
    Product,
    ProductWithFarm,
    FarmerDashboard,
)
from .orders import (
    OrderCreate,
    Order,
    OrderFarm,
    OrderProduct,
    OrderWithProduct,
    CustomerDashboard,
)
from .ledger import BlockchainTransaction
from .deliveries import (
    CheckpointCreate,
    Checkpoint,
    CheckpointRecorded,
    DeliveryStats,
    DeliveryDashboard,
    ReviewCreate,
    Review,
    ReviewWithFarmer,
)
from .admin import AdminStats, AdminDashboard

__all__ = [
    "Profile",
    "ProfileBase",
    "ProfileUpdate",
    "RoleSelection",
    "RoleOption",
    "Me",
    "FarmBase",
    "FarmCreate",
    "Farm",
    "FarmSummary",
    "ProductBase",
    "ProductCreate",
    "Product",
    "ProductWithFarm",
    "FarmerDashboard",
    "OrderCreate",
    "Order",
    "OrderFarm",
    "OrderProduct",
    "OrderWithProduct",
    "CustomerDashboard",
    "BlockchainTransaction",
    "CheckpointCreate",
    "Checkpoint",
    "CheckpointRecorded",
    "DeliveryStats",
    "DeliveryDashboard",
    "ReviewCreate",
    "Review",
    "ReviewWithFarmer",
    "AdminStats",
    "AdminDashboard",
]
