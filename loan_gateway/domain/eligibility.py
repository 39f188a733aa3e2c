"""Eligibility rule - core business logic for loan decisions"""

from datetime import date
from typing import Optional

from loan_gateway.domain import messages
from loan_gateway.domain.exceptions import ApplicantValidationError, DocumentRejectedError
from loan_gateway.domain.models import ApplicantRecord, EligibilityDecision, FinancialRecord
from loan_gateway.domain.providers import DocumentVerifier, PriceOracle
from loan_gateway.utils.date_utils import calendar_year_difference

MINIMUM_AGE = 18
QUARTERS_PER_YEAR = 4


def calculate_age(date_of_birth: date, today: date) -> int:
    """
    Age in whole years as calendar-year difference.

    Month and day are ignored: someone born 2008-12-31 is 18 on 2026-01-01.
    """
    return calendar_year_difference(date_of_birth, today)


def compute_total_assets(finances: FinancialRecord, oracle: PriceOracle) -> float:
    """Annual salary plus the value of every stock position"""
    total = finances.salary_per_quarter * QUARTERS_PER_YEAR
    for position in finances.stock:
        total += oracle.value(position)
    return total


def compute_total_liabilities(finances: FinancialRecord) -> float:
    """Home loan plus credit card debt, absent amounts count as zero"""
    return (finances.current_home_loan_debt or 0) + (finances.total_credit_card_debt or 0)


def evaluate(
    record: ApplicantRecord,
    verifier: DocumentVerifier,
    oracle: PriceOracle,
    today: Optional[date] = None,
) -> EligibilityDecision:
    """
    Decide loan eligibility for a validated applicant.

    Rules:
    - License upload must pass document verification
    - Applicant must be at least 18 (calendar-year difference)
    - Approve only when total assets strictly exceed total liabilities

    Raises:
        DocumentRejectedError: license failed verification
        ApplicantValidationError: date of birth unusable or applicant under age
    """
    if today is None:
        today = date.today()

    if not verifier.verify(record.license):
        raise DocumentRejectedError("License upload failed verification")

    if not isinstance(record.date_of_birth, date):
        raise ApplicantValidationError(messages.INVALID_DATE_OF_BIRTH_ERROR)

    age = calculate_age(record.date_of_birth, today)
    if age < MINIMUM_AGE:
        raise ApplicantValidationError(messages.INVALID_APPLICANT_AGE_ERROR)

    total_assets = compute_total_assets(record.finances, oracle)
    total_liabilities = compute_total_liabilities(record.finances)

    return EligibilityDecision(
        approved=total_assets > total_liabilities,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        age=age,
    )
