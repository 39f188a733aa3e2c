"""Dependency injection for FastAPI endpoints"""

from datetime import date
from typing import Iterator

from fastapi import Request

from loan_gateway.config import settings
from loan_gateway.domain.providers import (
    DocumentVerifier,
    FixedPriceOracle,
    ImageDocumentVerifier,
    PresenceDocumentVerifier,
    PriceOracle,
)
from loan_gateway.infrastructure.clients.market import MarketPriceOracle
from loan_gateway.infrastructure.storage.applications import InMemoryApplicationStore, application_store


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Reference date for age calculation"""
    return date.today()


def get_document_verifier() -> DocumentVerifier:
    """Provide the configured license verifier"""
    if settings.document_verifier == "image":
        return ImageDocumentVerifier()
    return PresenceDocumentVerifier()


def get_price_oracle() -> Iterator[PriceOracle]:
    """Provide the configured stock valuation strategy, one market client per request"""
    if settings.price_oracle != "market":
        yield FixedPriceOracle(settings.stock_unit_price)
        return

    oracle = MarketPriceOracle()
    try:
        yield oracle
    finally:
        oracle.close()


def get_application_store() -> InMemoryApplicationStore:
    """Provide the process-wide application store"""
    return application_store
