"""Payment domain package.

This package contains the payment instruction model and its SPAYD
serialization, plus the port for rendering it as a QR code.
"""
