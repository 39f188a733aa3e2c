"""Pluggable document verification and stock valuation strategies"""

import base64
import binascii
from typing import Protocol

from loan_gateway.domain.models import StockPosition

# JPEG, PNG, GIF87a/GIF89a
IMAGE_SIGNATURES = (
    b"\xff\xd8\xff",
    b"\x89PNG\r\n\x1a\n",
    b"GIF87a",
    b"GIF89a",
)


class DocumentVerifier(Protocol):
    def verify(self, license_base64: str) -> bool: ...


class PriceOracle(Protocol):
    def value(self, position: StockPosition) -> float: ...


class PresenceDocumentVerifier:
    """Accepts any non-empty upload"""

    def verify(self, license_base64: str) -> bool:
        return bool(license_base64)


class ImageDocumentVerifier:
    """Accepts base64 uploads that decode to a JPEG, PNG or GIF image"""

    def verify(self, license_base64: str) -> bool:
        if not license_base64:
            return False

        # Tolerate data URLs: "data:image/png;base64,...."
        _, _, payload = license_base64.rpartition(",")
        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            return False

        return raw.startswith(IMAGE_SIGNATURES)


class FixedPriceOracle:
    """Values every share at a fixed unit price"""

    def __init__(self, unit_price: float = 18):
        self.unit_price = unit_price

    def value(self, position: StockPosition) -> float:
        return position.quantity * self.unit_price
