"""Unit tests for error code normalization"""

import typing

import pytest
from pydantic import BaseModel

from loan_gateway.api.routes.schemas import ApplicantRequest
from loan_gateway.domain import messages
from loan_gateway.domain.exceptions import UnmappedFieldError
from loan_gateway.domain.models import Violation, ViolationKind
from loan_gateway.domain.normalizer import FIELD_ERROR_CODES, code_for, collect_codes, normalize

MISSING = ViolationKind.MISSING
INVALID = ViolationKind.INVALID

# Codes clients already pattern-match on
PUBLISHED_CODES = {
    "invalid-applicant-age-error",
    "invalid-credit-card-debt-amount-error",
    "invalid-date-of-birth-error",
    "invalid-first-name-error",
    "invalid-home-loan-debt-amount-error",
    "invalid-last-name-error",
    "invalid-license-upload-size-error",
    "invalid-location-error",
    "invalid-savings-amount-error",
    "invalid-stock-name-error",
    "invalid-stock-quantity-error",
    "missing-credit-card-debt-amount-error",
    "missing-date-of-birth-error",
    "missing-first-name-error",
    "missing-home-loan-debt-amount-error",
    "missing-last-name-error",
    "missing-license-upload-error",
    "missing-location-error",
    "missing-savings-amount-error",
    "missing-stock-name-error",
    "missing-stock-quantity-error",
}


def _leaf_paths(model: typing.Type[BaseModel], prefix: str = "") -> typing.List[str]:
    paths = []
    for name, field in model.model_fields.items():
        annotation = field.annotation
        args = typing.get_args(annotation)
        nested = args[0] if args else annotation
        if isinstance(nested, type) and issubclass(nested, BaseModel):
            paths.extend(_leaf_paths(nested, f"{prefix}{name}."))
        else:
            paths.append(f"{prefix}{name}")
    return paths


def test_every_schema_field_has_error_codes():
    paths = _leaf_paths(ApplicantRequest)

    assert len(paths) == 11
    for path in paths:
        missing_code, invalid_code = FIELD_ERROR_CODES[path]
        assert missing_code is not None, path
        assert invalid_code is not None, path


def test_table_only_emits_listed_codes():
    emitted = {code for pair in FIELD_ERROR_CODES.values() for code in pair if code is not None}
    assert emitted == set(messages.BAD_REQUEST_ERRORS)


def test_published_codes_are_all_reproduced():
    assert PUBLISHED_CODES <= set(messages.BAD_REQUEST_ERRORS)
    assert messages.BAD_REQUEST_ERRORS - PUBLISHED_CODES == {
        "invalid-salary-per-quarter-error",
        "missing-salary-per-quarter-error",
    }


@pytest.mark.parametrize(
    "violation,code",
    [
        (Violation("lastName", MISSING), "missing-last-name-error"),
        (Violation("lastName", INVALID), "invalid-last-name-error"),
        (Violation("license", MISSING), "missing-license-upload-error"),
        (Violation("license", INVALID), "invalid-license-upload-size-error"),
        (Violation("finances.totalCreditCardDebt", INVALID), "invalid-credit-card-debt-amount-error"),
        (Violation("finances.currentHomeLoanDebt", MISSING), "missing-home-loan-debt-amount-error"),
        (Violation("finances.stock.quantity", MISSING), "missing-stock-quantity-error"),
        (Violation("applicantAge", INVALID), "invalid-applicant-age-error"),
    ],
)
def test_code_for(violation, code):
    assert code_for(violation) == code


def test_first_violation_wins():
    violations = [
        Violation("location", INVALID),
        Violation("firstName", MISSING),
        Violation("finances.totalSavings", INVALID),
    ]
    assert normalize(violations) == "invalid-location-error"


def test_collect_codes_deduplicates_in_order():
    violations = [
        Violation("finances.stock.name", MISSING),
        Violation("finances.stock.quantity", INVALID),
        Violation("finances.stock.name", MISSING),
    ]
    assert collect_codes(violations) == ["missing-stock-name-error", "invalid-stock-quantity-error"]


def test_normalize_requires_a_violation():
    with pytest.raises(ValueError):
        normalize([])


def test_unknown_field_is_a_defect():
    with pytest.raises(UnmappedFieldError):
        normalize([Violation("middleName", MISSING)])


def test_age_has_no_missing_code():
    with pytest.raises(UnmappedFieldError):
        code_for(Violation("applicantAge", MISSING))


def test_status_for_code():
    assert messages.status_for_code("missing-first-name-error") == 400
    assert messages.status_for_code("invalid-applicant-age-error") == 400
    assert messages.status_for_code(messages.NOT_FOUND_ERROR) == 404
    assert messages.status_for_code(messages.INTERNAL_SERVER_ERROR) == 500

    with pytest.raises(ValueError):
        messages.status_for_code("invalid-first-name-length-error")
