"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from one import path.
"""

from .base import Base, now_utc  # re-export

from .users import User, Profile, UserRole
from .farms import Farm, Product
from .orders import Order
from .ledger import BlockchainTransaction
from .deliveries import DeliveryCheckpoint, Review

__all__ = [
    # base
    "Base",
    "now_utc",
    # identity
    "User",
    "Profile",
    "UserRole",
    # marketplace
    "Farm",
    "Product",
    "Order",
    # traceability
    "BlockchainTransaction",
    "DeliveryCheckpoint",
    "Review",
]
