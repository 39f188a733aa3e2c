"""Error code normalization - maps validator violations to published error codes"""

from typing import Dict, List, Optional, Sequence, Tuple

from loan_gateway.domain import messages
from loan_gateway.domain.exceptions import UnmappedFieldError
from loan_gateway.domain.models import Violation, ViolationKind

# Wire field path -> (missing code, invalid code)
FIELD_ERROR_CODES: Dict[str, Tuple[Optional[str], str]] = {
    "firstName": (messages.MISSING_FIRST_NAME_ERROR, messages.INVALID_FIRST_NAME_ERROR),
    "lastName": (messages.MISSING_LAST_NAME_ERROR, messages.INVALID_LAST_NAME_ERROR),
    "location": (messages.MISSING_LOCATION_ERROR, messages.INVALID_LOCATION_ERROR),
    "dateOfBirth": (messages.MISSING_DATE_OF_BIRTH_ERROR, messages.INVALID_DATE_OF_BIRTH_ERROR),
    "license": (messages.MISSING_LICENSE_UPLOAD_ERROR, messages.INVALID_LICENSE_UPLOAD_SIZE_ERROR),
    "finances.salaryPerQuarter": (
        messages.MISSING_SALARY_PER_QUARTER_ERROR,
        messages.INVALID_SALARY_PER_QUARTER_ERROR,
    ),
    "finances.totalCreditCardDebt": (
        messages.MISSING_CREDIT_CARD_DEBT_AMOUNT_ERROR,
        messages.INVALID_CREDIT_CARD_DEBT_AMOUNT_ERROR,
    ),
    "finances.currentHomeLoanDebt": (
        messages.MISSING_HOME_LOAN_DEBT_AMOUNT_ERROR,
        messages.INVALID_HOME_LOAN_DEBT_AMOUNT_ERROR,
    ),
    "finances.totalSavings": (
        messages.MISSING_SAVINGS_AMOUNT_ERROR,
        messages.INVALID_SAVINGS_AMOUNT_ERROR,
    ),
    "finances.stock.name": (messages.MISSING_STOCK_NAME_ERROR, messages.INVALID_STOCK_NAME_ERROR),
    "finances.stock.quantity": (
        messages.MISSING_STOCK_QUANTITY_ERROR,
        messages.INVALID_STOCK_QUANTITY_ERROR,
    ),
    # Business rule, never reported missing
    "applicantAge": (None, messages.INVALID_APPLICANT_AGE_ERROR),
}


def code_for(violation: Violation) -> str:
    """Look up the error code for a single violation"""
    try:
        missing_code, invalid_code = FIELD_ERROR_CODES[violation.field]
    except KeyError:
        raise UnmappedFieldError(f"No error code for field {violation.field!r}") from None

    code = missing_code if violation.kind is ViolationKind.MISSING else invalid_code
    if code is None:
        raise UnmappedFieldError(f"Field {violation.field!r} has no {violation.kind.value} code")
    return code


def collect_codes(violations: Sequence[Violation]) -> List[str]:
    """All codes for the violations, deduplicated, in emission order"""
    codes: List[str] = []
    for violation in violations:
        code = code_for(violation)
        if code not in codes:
            codes.append(code)
    return codes


def normalize(violations: Sequence[Violation]) -> str:
    """
    Reduce validator output to the one code returned to the client.

    The first violation wins; the validator emits in field declaration order,
    so the result is deterministic for a given payload.

    Raises:
        ValueError: violations is empty
        UnmappedFieldError: the first violation has no table entry
    """
    if not violations:
        raise ValueError("normalize() needs at least one violation")
    return code_for(violations[0])
