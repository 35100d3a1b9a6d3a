"""Root pytest configuration.

Test Structure:
    tests/
    └── unit/
        ├── domain/          # Pure domain logic (IBAN, SPAYD serialization)
        ├── application/     # Application services with fake ports
        ├── infrastructure/  # QR code adapter (qrcode + Pillow)
        ├── presentation/    # Typer CLI
        └── config/          # pydantic-settings configuration
"""

import os

import pytest

from spayd_config import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test with default settings, unaffected by the environment."""
    for key in list(os.environ):
        if key.startswith("SPAYD_"):
            monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
