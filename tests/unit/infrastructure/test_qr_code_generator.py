"""Tests for the qrcode/Pillow QR code adapter."""

from io import BytesIO

import pytest
from PIL import Image

from spayd.domain.payment.exceptions import QrCodeCapacityError, UnencodableTextError
from spayd.domain.payment.ports import QrCodeEncoderPort
from spayd.domain.shared.exceptions import ErrorCode, ValidationError
from spayd.infrastructure.qr import QrCodeGenerator

SPAYD = (
    "SPD*1.0*ACC:CZ5508000000001234567899+GIBACZPX*AM:123.45*CC:CZK"
    "*DT:20290131*MSG:ZPRAVA PRO PRIJEMCE"
)


@pytest.fixture
def generator() -> QrCodeGenerator:
    return QrCodeGenerator()


class TestQrCodeGenerator:
    def test_implements_port(self, generator):
        assert isinstance(generator, QrCodeEncoderPort)

    def test_renders_square_png(self, generator):
        data = generator.encode(SPAYD, 100)

        assert data.startswith(b"\x89PNG")
        image = Image.open(BytesIO(data))
        assert image.format == "PNG"
        assert image.size == (100, 100)

    def test_image_has_dark_and_light_modules(self, generator):
        image = Image.open(BytesIO(generator.encode(SPAYD, 200))).convert("L")

        assert image.getextrema() == (0, 255)

    def test_latin1_payload(self, generator):
        data = generator.encode("SPD*1.0*ACC:CZ5508000000001234567899*MSG:Zpráva", 150)

        assert Image.open(BytesIO(data)).size == (150, 150)

    def test_output_is_deterministic(self, generator):
        assert generator.encode(SPAYD, 120) == generator.encode(SPAYD, 120)

    def test_size_too_small_for_matrix(self, generator):
        with pytest.raises(QrCodeCapacityError) as exc_info:
            generator.encode(SPAYD, 10)

        assert exc_info.value.code == ErrorCode.QR_CAPACITY_EXCEEDED
        assert exc_info.value.details == {"size": 10}

    def test_payload_exceeds_qr_capacity(self, generator):
        payload = "SPD*1.0*MSG:" + "A" * 3000

        with pytest.raises(QrCodeCapacityError) as exc_info:
            generator.encode(payload, 1000)

        assert "exceeds QR code capacity" in exc_info.value.message
        assert exc_info.value.code == ErrorCode.QR_CAPACITY_EXCEEDED
        assert exc_info.value.details == {"size": 1000}

    def test_non_positive_size(self, generator):
        with pytest.raises(ValidationError, match="must be positive"):
            generator.encode(SPAYD, 0)

    def test_text_outside_latin1(self, generator):
        with pytest.raises(UnencodableTextError):
            generator.encode("SPD*1.0*MSG:příjemce", 100)
