"""Pydantic schemas for API request/response validation"""

import re
from datetime import date
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from loan_gateway.domain.messages import SUCCESS
from loan_gateway.domain.models import ApplicantRecord, FinancialRecord, StockPosition

NAME_MAX_LENGTH = 50
LICENSE_MAX_LENGTH = 5_000_000
STOCK_QUANTITY_MAX = 1000

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def reject_bool(v):
    """JSON true/false would otherwise coerce to 1/0"""
    if isinstance(v, bool):
        raise ValueError("expected a number, got a boolean")
    return v


class StockSchema(BaseModel):
    """Single stock holding"""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Trading name of the stock's company")
    quantity: int = Field(..., ge=1, le=STOCK_QUANTITY_MAX, description="Number of shares owned")

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_not_bool(cls, v):
        return reject_bool(v)

    def to_position(self) -> StockPosition:
        return StockPosition(name=self.name, quantity=self.quantity)


class FinancesSchema(BaseModel):
    """Applicant financial information"""

    salaryPerQuarter: int = Field(..., description="Salary per quarter")
    totalCreditCardDebt: float = Field(..., ge=0, allow_inf_nan=False, description="Total credit card debt")
    currentHomeLoanDebt: float = Field(..., ge=0, allow_inf_nan=False, description="Current home loan debt")
    totalSavings: float = Field(..., ge=0, allow_inf_nan=False, description="Total savings")
    stock: List[StockSchema] = Field(default_factory=list, description="Stock the applicant owns")

    @field_validator("salaryPerQuarter", "totalCreditCardDebt", "currentHomeLoanDebt", "totalSavings", mode="before")
    @classmethod
    def amounts_not_bool(cls, v):
        return reject_bool(v)

    @field_validator("stock", mode="before")
    @classmethod
    def default_empty_stock(cls, v):
        return [] if v is None else v

    def to_record(self) -> FinancialRecord:
        return FinancialRecord(
            salary_per_quarter=self.salaryPerQuarter,
            total_credit_card_debt=self.totalCreditCardDebt,
            current_home_loan_debt=self.currentHomeLoanDebt,
            total_savings=self.totalSavings,
            stock=tuple(s.to_position() for s in self.stock),
        )


class ApplicantRequest(BaseModel):
    """Request body for POST /submit"""

    firstName: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Joe"])
    lastName: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Smith"])
    location: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Canberra"])
    dateOfBirth: date = Field(..., description="Date of birth in YYYY-MM-DD format", examples=["1999-12-03"])
    license: str = Field(
        ..., min_length=1, max_length=LICENSE_MAX_LENGTH, description="License or ID image as a base64 string"
    )
    finances: FinancesSchema

    @field_validator("dateOfBirth", mode="before")
    @classmethod
    def require_date_string(cls, v):
        # Lax date parsing would accept timestamps and datetimes; only YYYY-MM-DD is allowed
        if v is None or isinstance(v, date):
            return v
        if isinstance(v, str) and ISO_DATE_PATTERN.fullmatch(v):
            return date.fromisoformat(v)
        raise ValueError("date of birth must be a YYYY-MM-DD string")

    def to_record(self) -> ApplicantRecord:
        return ApplicantRecord(
            first_name=self.firstName,
            last_name=self.lastName,
            location=self.location,
            date_of_birth=self.dateOfBirth,
            license=self.license,
            finances=self.finances.to_record(),
        )


class SubmitResponse(BaseModel):
    """Response for POST /submit"""

    message: Literal["success"] = SUCCESS
    approved: bool


class ErrorResponse(BaseModel):
    """Any failed request: a single published error code"""

    message: str
