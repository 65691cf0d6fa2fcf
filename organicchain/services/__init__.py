"""
Service layer package.

Exports the QR rendering helpers used by the product endpoints.
"""

from .qr_service import QRRenderError, render_qr_svg

__all__ = ["QRRenderError", "render_qr_svg"]
