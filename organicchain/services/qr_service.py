"""
QR code rendering for product traceability payloads.

Renders SVG so no imaging backend is required.
"""
from __future__ import annotations

import io
import logging

import qrcode
import qrcode.constants
import qrcode.exceptions
import qrcode.image.svg

logger = logging.getLogger(__name__)

QR_BOX_SIZE = 10
QR_BORDER = 4


class QRRenderError(RuntimeError):
    """Raised when a payload cannot be encoded into a QR code."""


def render_qr_svg(data: str, *, box_size: int = QR_BOX_SIZE, border: int = QR_BORDER) -> bytes:
    """Encode ``data`` as a QR code and return the SVG document bytes."""
    if not data:
        raise QRRenderError("QR payload is empty")
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
        image_factory=qrcode.image.svg.SvgPathImage,
    )
    try:
        qr.add_data(data)
        qr.make(fit=True)
    except (qrcode.exceptions.DataOverflowError, ValueError) as e:
        logger.warning("qr_render_failed: payload_length=%d error=%s", len(data), e)
        raise QRRenderError(f"QR payload too large: {len(data)} characters") from e
    img = qr.make_image()
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()
