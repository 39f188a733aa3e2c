"""Unit tests for document verification and stock valuation strategies"""

import base64

import pytest

from loan_gateway.domain.models import StockPosition
from loan_gateway.domain.providers import FixedPriceOracle, ImageDocumentVerifier, PresenceDocumentVerifier


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def test_presence_verifier():
    verifier = PresenceDocumentVerifier()
    assert verifier.verify("anything") is True
    assert verifier.verify("") is False


@pytest.mark.parametrize(
    "raw",
    [
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00",
        b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
        b"GIF89a\x01\x00\x01\x00",
        b"GIF87a\x01\x00\x01\x00",
    ],
)
def test_image_verifier_accepts_supported_formats(raw):
    assert ImageDocumentVerifier().verify(_b64(raw)) is True


def test_image_verifier_accepts_data_url():
    payload = "data:image/gif;base64," + _b64(b"GIF89a\x01\x00\x01\x00")
    assert ImageDocumentVerifier().verify(payload) is True


@pytest.mark.parametrize(
    "payload",
    [
        "",
        _b64(b"%PDF-1.7 not an image"),
        "this is not base64!",
    ],
)
def test_image_verifier_rejects(payload):
    assert ImageDocumentVerifier().verify(payload) is False


def test_fixed_price_oracle_default_price():
    assert FixedPriceOracle().value(StockPosition("ACME", 10)) == 180
    assert FixedPriceOracle(2.5).value(StockPosition("ACME", 4)) == 10
