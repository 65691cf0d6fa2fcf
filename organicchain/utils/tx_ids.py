"""
Transaction id and QR payload helpers.

Transaction ids look like Ethereum hashes (``0x`` + 64 hex digits) but are
plain random values with no cryptographic relationship to anything.
"""
from __future__ import annotations

import json
import re
import secrets
import time
import uuid
from typing import Optional

TX_ID_PREFIX = "0x"
TX_ID_HEX_LENGTH = 64
_TX_ID_RE = re.compile(r"^0x[0-9a-f]{64}$")


def generate_blockchain_tx_id() -> str:
    """Return a random transaction id of the form ``0x`` + 64 lowercase hex digits."""
    return f"{TX_ID_PREFIX}{secrets.token_hex(TX_ID_HEX_LENGTH // 2)}"


def is_blockchain_tx_id(value: Optional[str]) -> bool:
    return bool(value) and bool(_TX_ID_RE.match(value))


def short_tx_id(tx_id: str, length: int = 16) -> str:
    """Display prefix used in log lines and confirmation messages."""
    return f"{tx_id[:length]}..."


def generate_qr_data(product_id: uuid.UUID | str, tx_id: str, *, timestamp_ms: Optional[int] = None) -> str:
    """Return the JSON payload encoded into a product's QR code."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return json.dumps({
        "productId": str(product_id),
        "txId": tx_id,
        "timestamp": timestamp_ms,
    })


def parse_qr_data(payload: Optional[str]) -> Optional[dict]:
    """Parse a QR payload; returns None if it is not a product payload."""
    if not payload:
        return None
    try:
        data = json.loads(payload)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict) or "productId" not in data or "txId" not in data:
        return None
    return data
