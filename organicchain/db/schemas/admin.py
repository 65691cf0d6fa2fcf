from pydantic import BaseModel

from .orders import OrderWithProduct
from .ledger import BlockchainTransaction
from .deliveries import ReviewWithFarmer


class AdminStats(BaseModel):
    total_orders: int
    active_deliveries: int
    completed_deliveries: int
    blockchain_records: int


class AdminDashboard(BaseModel):
    stats: AdminStats
    recent_orders: list[OrderWithProduct]
    recent_transactions: list[BlockchainTransaction]
    reviews: list[ReviewWithFarmer]
