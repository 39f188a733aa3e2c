"""Pytest fixtures for testing"""

import copy
from datetime import date
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from loan_gateway.api.dependencies import (
    get_application_store,
    get_document_verifier,
    get_price_oracle,
    get_today,
)
from loan_gateway.api.main import create_app
from loan_gateway.domain.models import ApplicantRecord, FinancialRecord, StockPosition
from loan_gateway.domain.providers import FixedPriceOracle, PresenceDocumentVerifier
from loan_gateway.infrastructure.storage.applications import InMemoryApplicationStore

TODAY = date(2026, 6, 15)

# 1x1 transparent PNG
PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

BASE_PAYLOAD: Dict[str, Any] = {
    "firstName": "Joe",
    "lastName": "Smith",
    "location": "Canberra",
    "dateOfBirth": "1996-03-14",  # 30 on TODAY
    "license": PNG_BASE64,
    "finances": {
        "salaryPerQuarter": 1000,
        "totalCreditCardDebt": 0,
        "currentHomeLoanDebt": 0,
        "totalSavings": 2500,
        "stock": [],
    },
}


@pytest.fixture
def applicant_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for a valid submission; keyword args override finances or top-level fields"""

    def make(**overrides: Any) -> Dict[str, Any]:
        payload = copy.deepcopy(BASE_PAYLOAD)
        for key, value in overrides.items():
            if key in payload["finances"]:
                payload["finances"][key] = value
            else:
                payload[key] = value
        return payload

    return make


@pytest.fixture
def make_record() -> Callable[..., ApplicantRecord]:
    """Factory for validated applicant records"""

    def make(
        salary_per_quarter: int = 1000,
        total_credit_card_debt: float = 0,
        current_home_loan_debt: float = 0,
        total_savings: float = 0,
        stock: tuple = (),
        date_of_birth: date = date(1996, 3, 14),
        license: str = PNG_BASE64,
    ) -> ApplicantRecord:
        return ApplicantRecord(
            first_name="Joe",
            last_name="Smith",
            location="Canberra",
            date_of_birth=date_of_birth,
            license=license,
            finances=FinancialRecord(
                salary_per_quarter=salary_per_quarter,
                total_credit_card_debt=total_credit_card_debt,
                current_home_loan_debt=current_home_loan_debt,
                total_savings=total_savings,
                stock=tuple(StockPosition(name, qty) for name, qty in stock),
            ),
        )

    return make


@pytest.fixture
def store() -> InMemoryApplicationStore:
    return InMemoryApplicationStore()


@pytest.fixture
def app(store: InMemoryApplicationStore):
    """FastAPI app with deterministic clock and default strategies"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_document_verifier] = PresenceDocumentVerifier
    app.dependency_overrides[get_price_oracle] = lambda: FixedPriceOracle(18)
    app.dependency_overrides[get_application_store] = lambda: store
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app, raise_server_exceptions=False)
