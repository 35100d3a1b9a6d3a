"""QR code rendering adapters."""

from spayd.infrastructure.qr.qr_code_generator import QrCodeGenerator

__all__ = [
    "QrCodeGenerator",
]
