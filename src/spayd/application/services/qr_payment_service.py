"""Service for turning payments into SPAYD QR code images."""

from __future__ import annotations

import logging

from spayd.domain.payment.ports import QrCodeEncoderPort
from spayd.domain.payment.services import serialize
from spayd.domain.payment.value_objects import Payment
from spayd_config import Settings, get_settings

logger = logging.getLogger(__name__)


class QrPaymentService:
    """Serialize payments and render them through a QR code encoder."""

    def __init__(self, encoder: QrCodeEncoderPort, settings: Settings | None = None):
        self._encoder = encoder
        self._settings = settings or get_settings()

    def generate_qr_code(
        self,
        payment: Payment,
        size: int | None = None,
        include_checksum: bool | None = None,
        normalize_strings: bool | None = None,
    ) -> bytes:
        """Serialize the payment and render it as a QR code.

        Arguments left as None fall back to the configured defaults.
        """
        if include_checksum is None:
            include_checksum = self._settings.include_checksum
        if normalize_strings is None:
            normalize_strings = self._settings.normalize_strings

        spayd = serialize(
            payment,
            include_checksum=include_checksum,
            normalize_strings=normalize_strings,
        )
        return self.generate_qr_code_from_string(spayd, size)

    def generate_qr_code_from_string(
        self,
        spayd: str,
        size: int | None = None,
    ) -> bytes:
        size = size if size is not None else self._settings.qr_size
        logger.debug("Generating %dpx QR code for SPAYD: %s", size, spayd)
        return self._encoder.encode(spayd, size)
