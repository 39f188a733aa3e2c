"""Outward response shape: {"message": ..., "approved": ...}"""

from fastapi.responses import JSONResponse

from loan_gateway.api.routes.schemas import ErrorResponse, SubmitResponse
from loan_gateway.domain.messages import status_for_code
from loan_gateway.domain.models import EligibilityDecision


def success_response(decision: EligibilityDecision) -> SubmitResponse:
    return SubmitResponse(approved=decision.approved)


def error_response(code: str) -> JSONResponse:
    """Wrap an error code with the status its class maps to (400/404/500)"""
    return JSONResponse(
        status_code=status_for_code(code),
        content=ErrorResponse(message=code).model_dump(),
    )
