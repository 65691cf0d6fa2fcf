"""
"Blockchain" transaction recording helpers and action names.

Every traceable marketplace event is persisted as one row in
`blockchain_transactions` keyed by a random hex id. Rows are not chained,
hashed or verified.
"""
from __future__ import annotations
import logging
import uuid
from enum import Enum
from typing import Any, Optional, Dict
from sqlalchemy.orm import Session

from organicchain.db import models
from organicchain.db.repositories import ledger as ledger_repo
from organicchain.utils.tx_ids import generate_blockchain_tx_id, short_tx_id

logger = logging.getLogger(__name__)


class LedgerAction(str, Enum):
    HARVEST = "harvest"
    ORDER_CONFIRMED = "order_confirmed"
    # Delivery checkpoints reuse their checkpoint type as the action name
    FARM_PICKUP = "farm_pickup"
    WAREHOUSE = "warehouse"
    IN_TRANSIT = "in_transit"
    CUSTOMER_DELIVERY = "customer_delivery"
    VERIFIED = "verified"
    REVIEW = "review"


def record(
    db: Session,
    *,
    action_type: LedgerAction | str,
    actor_id: uuid.UUID,
    product_id: Optional[uuid.UUID] = None,
    order_id: Optional[uuid.UUID] = None,
    location: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    metadata: Optional[Dict[str, Any]] = None,
    transaction_id: Optional[str] = None,
) -> models.BlockchainTransaction:
    """Persist one transaction row and return it.

    A fresh id is generated unless ``transaction_id`` is supplied (used when the
    id must be known before the row is written, e.g. to embed it in a QR code).
    """
    # Persist plain strings, not Enum reprs
    action_value = action_type.value if isinstance(action_type, LedgerAction) else str(action_type)
    tx_id = transaction_id or generate_blockchain_tx_id()
    tx = ledger_repo.create_transaction(
        db,
        transaction_id=tx_id,
        action_type=action_value,
        actor_id=actor_id,
        product_id=product_id,
        order_id=order_id,
        location=location,
        latitude=latitude,
        longitude=longitude,
        metadata=metadata,
    )
    logger.info("ledger_record: action=%s tx=%s actor=%s", action_value, short_tx_id(tx_id), actor_id)
    return tx


__all__ = ["LedgerAction", "record"]
