"""QR code generator - infrastructure adapter for SPAYD QR images."""

from __future__ import annotations

import logging
from io import BytesIO

import qrcode
from PIL import Image, ImageDraw
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError
from qrcode.util import MODE_8BIT_BYTE, QRData

from spayd.domain.payment.exceptions import QrCodeCapacityError
from spayd.domain.payment.ports import QrCodeEncoderPort
from spayd.domain.payment.services import encode_payload
from spayd.domain.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "PNG"


class QrCodeGenerator(QrCodeEncoderPort):
    """Render SPAYD strings as PNG QR codes.

    The payload is written in 8-bit byte mode as ISO-8859-1 with error
    correction level M and no quiet zone. Modules are scaled by the
    largest whole factor that fits and centered on a ``size`` x ``size``
    white canvas.
    """

    def __init__(self, error_correction: int = ERROR_CORRECT_M):
        self._error_correction = error_correction

    def encode(self, payload: str, size: int) -> bytes:
        if size <= 0:
            msg = f"QR code size must be positive, got: {size}"
            raise ValidationError(msg, details={"field": "size", "value": size})

        matrix = self._build_matrix(encode_payload(payload), size)
        image = self._render(matrix, size)

        buffer = BytesIO()
        image.save(buffer, format=IMAGE_FORMAT)
        logger.debug(
            "Rendered QR code: %d modules into %dx%d px",
            len(matrix),
            size,
            size,
        )
        return buffer.getvalue()

    def _build_matrix(self, data: bytes, size: int) -> list[list[bool]]:
        qr = qrcode.QRCode(
            version=None,
            error_correction=self._error_correction,
            box_size=1,
            border=0,
        )
        qr.add_data(QRData(data, mode=MODE_8BIT_BYTE))
        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            # Newer qrcode releases reject the overflow as version 41
            # with a ValueError before raising DataOverflowError
            msg = f"Payload of {len(data)} bytes exceeds QR code capacity"
            raise QrCodeCapacityError(msg, size=size) from e

        matrix = qr.get_matrix()
        if len(matrix) > size:
            msg = (
                f"QR code with {len(matrix)} modules does not fit into "
                f"{size}x{size} px"
            )
            raise QrCodeCapacityError(msg, size=size)
        return matrix

    def _render(self, matrix: list[list[bool]], size: int) -> Image.Image:
        modules = len(matrix)
        scale = size // modules
        offset = (size - modules * scale) // 2

        image = Image.new("1", (size, size), 1)
        draw = ImageDraw.Draw(image)
        for row, line in enumerate(matrix):
            for column, dark in enumerate(line):
                if not dark:
                    continue
                left = offset + column * scale
                top = offset + row * scale
                draw.rectangle(
                    (left, top, left + scale - 1, top + scale - 1),
                    fill=0,
                )
        return image
