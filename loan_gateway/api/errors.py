"""Exception handlers mapping every failure to a published error code"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from loan_gateway.api.dependencies import get_request_id
from loan_gateway.api.envelope import error_response
from loan_gateway.api.validation import violations_from_errors
from loan_gateway.domain.exceptions import UnmappedFieldError
from loan_gateway.domain.messages import INTERNAL_SERVER_ERROR, NOT_FOUND_ERROR
from loan_gateway.domain.normalizer import collect_codes, normalize
from loan_gateway.infrastructure.observability.logging import log_rejection
from loan_gateway.infrastructure.observability.metrics import record_error

logger = logging.getLogger(__name__)

# Unknown path, or known path with an unsupported method
NOT_FOUND_STATUSES = {404, 405}


async def request_validation_handler(request: Request, exc: RequestValidationError):
    request_id = get_request_id(request)
    violations = violations_from_errors(exc.errors())
    try:
        code = normalize(violations)
        all_codes = collect_codes(violations)
    except UnmappedFieldError as e:
        logger.error(f"Unmapped validation failure: {e}", extra={"request_id": request_id})
        record_error(INTERNAL_SERVER_ERROR)
        return error_response(INTERNAL_SERVER_ERROR)

    record_error(code)
    log_rejection(request_id, code, all_codes)
    return error_response(code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in NOT_FOUND_STATUSES:
        code = NOT_FOUND_ERROR
    else:
        logger.error(
            f"HTTP error {exc.status_code}: {exc.detail}",
            extra={"request_id": get_request_id(request), "path": request.url.path},
        )
        code = INTERNAL_SERVER_ERROR
    record_error(code)
    return error_response(code)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort; never leaks exception text into the body"""
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={
            "request_id": get_request_id(request),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    record_error(INTERNAL_SERVER_ERROR)
    return error_response(INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
