"""Domain services for the payment domain."""

from spayd.domain.payment.services.spayd_serializer import (
    HEADER,
    PAYLOAD_ENCODING,
    SpaydKeys,
    build_fields,
    checksum,
    encode_payload,
    format_amount,
    format_due_date,
    normalize_text,
    serialize,
)

__all__ = [
    "HEADER",
    "PAYLOAD_ENCODING",
    "SpaydKeys",
    "build_fields",
    "checksum",
    "encode_payload",
    "format_amount",
    "format_due_date",
    "normalize_text",
    "serialize",
]
