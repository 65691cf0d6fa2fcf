"""
Product catalogue endpoints.

Public reads: available products with their farm, per-product
traceability history, and the product QR code.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from organicchain.db.database import get_db
from organicchain.db import schemas
from organicchain.db.repositories import farms as farms_repo
from organicchain.db.repositories import ledger as ledger_repo
from organicchain.services import QRRenderError, render_qr_svg
from organicchain.utils.tx_ids import parse_qr_data

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[schemas.ProductWithFarm])
def list_available_products(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    return farms_repo.get_available_products(db, skip=skip, limit=limit)


@router.get("/{product_id}", response_model=schemas.ProductWithFarm)
def get_product(product_id: uuid.UUID, db: Session = Depends(get_db)):
    product = farms_repo.get_product(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/{product_id}/history", response_model=List[schemas.BlockchainTransaction])
def get_product_history(product_id: uuid.UUID, db: Session = Depends(get_db)):
    """Complete traceability from farm to delivery, newest first."""
    if not farms_repo.get_product(db, product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return ledger_repo.get_transactions(db, product_id=product_id)


@router.get("/{product_id}/qr", response_class=Response)
def get_product_qr(product_id: uuid.UUID, db: Session = Depends(get_db)):
    product = farms_repo.get_product(db, product_id)
    if not product or not parse_qr_data(product.qr_code):
        raise HTTPException(status_code=404, detail="QR code not found")
    try:
        svg = render_qr_svg(product.qr_code)
    except QRRenderError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(content=svg, media_type="image/svg+xml")
