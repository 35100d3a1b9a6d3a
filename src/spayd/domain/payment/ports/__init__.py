"""Port interfaces for payment rendering.

Implementations (adapters) are provided in the infrastructure layer.
"""

from spayd.domain.payment.ports.qr_code_encoder_port import QrCodeEncoderPort

__all__ = [
    "QrCodeEncoderPort",
]
