"""QR code encoder port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class QrCodeEncoderPort(ABC):
    """
    Interface for rendering a SPAYD string into a QR code image.

    The encoder owns no payment logic; it only turns text into pixels.
    """

    @abstractmethod
    def encode(self, payload: str, size: int) -> bytes:
        """
        Render the payload as a square QR code image.

        Parameters
        ----------
        payload
            SPAYD string, encoded as ISO-8859-1 for the QR code
        size
            Width and height of the image in pixels

        Returns
        -------
        Raw image bytes

        Raises
        ------
        QrCodeCapacityError
            If the payload does not fit into a QR code of the given size
        """
