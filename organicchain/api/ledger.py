"""
Read access to recorded "blockchain" transactions.
"""
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import schemas
from organicchain.db.repositories import ledger as ledger_repo
from organicchain.utils.tx_ids import is_blockchain_tx_id

router = APIRouter(prefix="/ledger", tags=["ledger"])


@router.get("", response_model=List[schemas.BlockchainTransaction])
def list_transactions(
    product_id: Optional[uuid.UUID] = None,
    order_id: Optional[uuid.UUID] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    return ledger_repo.get_transactions(db, product_id=product_id, order_id=order_id, skip=skip, limit=limit)


@router.get("/{transaction_id}", response_model=schemas.BlockchainTransaction)
def get_transaction(transaction_id: str, db: Session = Depends(get_db)):
    if not is_blockchain_tx_id(transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    tx = ledger_repo.get_transaction(db, transaction_id.lower())
    if not tx:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return tx
