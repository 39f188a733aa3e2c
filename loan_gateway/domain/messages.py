"""Response messages - the closed set of strings clients pattern-match on"""

SUCCESS = "success"
NOT_FOUND_ERROR = "not-found-error"
INTERNAL_SERVER_ERROR = "internal-server-error"

INVALID_APPLICANT_AGE_ERROR = "invalid-applicant-age-error"
INVALID_CREDIT_CARD_DEBT_AMOUNT_ERROR = "invalid-credit-card-debt-amount-error"
INVALID_DATE_OF_BIRTH_ERROR = "invalid-date-of-birth-error"
INVALID_FIRST_NAME_ERROR = "invalid-first-name-error"
INVALID_HOME_LOAN_DEBT_AMOUNT_ERROR = "invalid-home-loan-debt-amount-error"
INVALID_LAST_NAME_ERROR = "invalid-last-name-error"
INVALID_LICENSE_UPLOAD_SIZE_ERROR = "invalid-license-upload-size-error"
INVALID_LOCATION_ERROR = "invalid-location-error"
INVALID_SALARY_PER_QUARTER_ERROR = "invalid-salary-per-quarter-error"
INVALID_SAVINGS_AMOUNT_ERROR = "invalid-savings-amount-error"
INVALID_STOCK_NAME_ERROR = "invalid-stock-name-error"
INVALID_STOCK_QUANTITY_ERROR = "invalid-stock-quantity-error"

MISSING_CREDIT_CARD_DEBT_AMOUNT_ERROR = "missing-credit-card-debt-amount-error"
MISSING_DATE_OF_BIRTH_ERROR = "missing-date-of-birth-error"
MISSING_FIRST_NAME_ERROR = "missing-first-name-error"
MISSING_HOME_LOAN_DEBT_AMOUNT_ERROR = "missing-home-loan-debt-amount-error"
MISSING_LAST_NAME_ERROR = "missing-last-name-error"
MISSING_LICENSE_UPLOAD_ERROR = "missing-license-upload-error"
MISSING_LOCATION_ERROR = "missing-location-error"
MISSING_SALARY_PER_QUARTER_ERROR = "missing-salary-per-quarter-error"
MISSING_SAVINGS_AMOUNT_ERROR = "missing-savings-amount-error"
MISSING_STOCK_NAME_ERROR = "missing-stock-name-error"
MISSING_STOCK_QUANTITY_ERROR = "missing-stock-quantity-error"

BAD_REQUEST_ERRORS = frozenset(
    {
        INVALID_APPLICANT_AGE_ERROR,
        INVALID_CREDIT_CARD_DEBT_AMOUNT_ERROR,
        INVALID_DATE_OF_BIRTH_ERROR,
        INVALID_FIRST_NAME_ERROR,
        INVALID_HOME_LOAN_DEBT_AMOUNT_ERROR,
        INVALID_LAST_NAME_ERROR,
        INVALID_LICENSE_UPLOAD_SIZE_ERROR,
        INVALID_LOCATION_ERROR,
        INVALID_SALARY_PER_QUARTER_ERROR,
        INVALID_SAVINGS_AMOUNT_ERROR,
        INVALID_STOCK_NAME_ERROR,
        INVALID_STOCK_QUANTITY_ERROR,
        MISSING_CREDIT_CARD_DEBT_AMOUNT_ERROR,
        MISSING_DATE_OF_BIRTH_ERROR,
        MISSING_FIRST_NAME_ERROR,
        MISSING_HOME_LOAN_DEBT_AMOUNT_ERROR,
        MISSING_LAST_NAME_ERROR,
        MISSING_LICENSE_UPLOAD_ERROR,
        MISSING_LOCATION_ERROR,
        MISSING_SALARY_PER_QUARTER_ERROR,
        MISSING_SAVINGS_AMOUNT_ERROR,
        MISSING_STOCK_NAME_ERROR,
        MISSING_STOCK_QUANTITY_ERROR,
    }
)

ERROR_STATUS_CODES = {
    **{code: 400 for code in BAD_REQUEST_ERRORS},
    NOT_FOUND_ERROR: 404,
    INTERNAL_SERVER_ERROR: 500,
}


def status_for_code(code: str) -> int:
    """
    HTTP status for an error code.

    Raises:
        ValueError: code is not part of the published enumeration
    """
    try:
        return ERROR_STATUS_CODES[code]
    except KeyError:
        raise ValueError(f"Unlisted error code: {code!r}") from None
