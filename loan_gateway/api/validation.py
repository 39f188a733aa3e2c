"""Schema validation - turns pydantic errors into ordered field violations"""

from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from loan_gateway.api.routes.schemas import ApplicantRequest
from loan_gateway.domain.models import Violation, ViolationKind

# Failures on a container are reported against its first member field
CONTAINER_FIELDS = {
    "": "firstName",
    "finances": "finances.salaryPerQuarter",
    "finances.stock": "finances.stock.name",
}


def _is_missing(error: Dict[str, Any]) -> bool:
    """Absent, null, empty string and numeric zero all count as not supplied"""
    if error["type"] == "missing":
        return True
    value = error.get("input")
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def field_path(loc: Sequence[Any]) -> str:
    """Dotted wire path for an error location, minus request section and list indexes"""
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    path = ".".join(str(p) for p in parts if isinstance(p, str))
    return CONTAINER_FIELDS.get(path, path)


def violations_from_errors(errors: Sequence[Dict[str, Any]]) -> List[Violation]:
    """
    Convert pydantic/FastAPI error dicts to violations.

    Emission order follows the errors, which pydantic reports in field
    declaration order (nested stock entries inline, by index).
    """
    return [
        Violation(
            field=field_path(error["loc"]),
            kind=ViolationKind.MISSING if _is_missing(error) else ViolationKind.INVALID,
        )
        for error in errors
    ]


def validate_payload(payload: Any) -> List[Violation]:
    """Validate an untyped applicant payload; empty list means it is well-formed"""
    try:
        ApplicantRequest.model_validate(payload)
    except ValidationError as e:
        return violations_from_errors(e.errors())
    return []
