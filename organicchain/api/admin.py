"""
Admin dashboard: marketplace-wide counts and recent activity.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import schemas
from organicchain.db.repositories import orders as orders_repo
from organicchain.db.repositories import ledger as ledger_repo
from organicchain.db.repositories import deliveries as deliveries_repo
from organicchain.api.deps import require_role
from organicchain.utils.roles import ROLE_ADMIN
from organicchain.utils.statuses import ACTIVE_DELIVERY_STATUSES, COMPLETED_DELIVERY_STATUSES

router = APIRouter(tags=["admin"])


@router.get("/admin", response_model=schemas.AdminDashboard)
def admin_dashboard(
    db: Session = Depends(get_db),
    user_context = Depends(require_role(ROLE_ADMIN)),
):
    stats = schemas.AdminStats(
        total_orders=orders_repo.count_orders(db),
        active_deliveries=orders_repo.count_orders(db, ACTIVE_DELIVERY_STATUSES),
        completed_deliveries=orders_repo.count_orders(db, COMPLETED_DELIVERY_STATUSES),
        blockchain_records=ledger_repo.count_transactions(db),
    )
    reviews = []
    for review, farmer_name in deliveries_repo.get_recent_reviews_with_farmer(db, limit=5):
        item = schemas.ReviewWithFarmer.model_validate(review)
        item.farmer_name = farmer_name
        reviews.append(item)
    return schemas.AdminDashboard(
        stats=stats,
        recent_orders=orders_repo.get_recent_orders(db, limit=10),
        recent_transactions=ledger_repo.get_transactions(db, limit=10),
        reviews=reviews,
    )
