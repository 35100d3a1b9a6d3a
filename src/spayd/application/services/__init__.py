"""Application layer services."""

from spayd.application.services.qr_payment_service import QrPaymentService

__all__ = [
    "QrPaymentService",
]
