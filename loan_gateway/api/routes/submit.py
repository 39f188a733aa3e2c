"""POST /submit - loan eligibility decision endpoint"""

import logging
import time
from datetime import date

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from loan_gateway.api.dependencies import (
    get_application_store,
    get_document_verifier,
    get_price_oracle,
    get_request_id,
    get_today,
)
from loan_gateway.api.envelope import error_response, success_response
from loan_gateway.api.routes.schemas import ApplicantRequest, ErrorResponse, SubmitResponse
from loan_gateway.domain.eligibility import evaluate
from loan_gateway.domain.exceptions import ApplicantValidationError
from loan_gateway.domain.messages import INTERNAL_SERVER_ERROR
from loan_gateway.domain.models import ApplicantRecord
from loan_gateway.domain.providers import DocumentVerifier, PriceOracle
from loan_gateway.infrastructure.observability.logging import log_decision, log_rejection
from loan_gateway.infrastructure.observability.metrics import record_decision, record_error
from loan_gateway.infrastructure.storage.applications import InMemoryApplicationStore

logger = logging.getLogger(__name__)

router = APIRouter()


def save_application(store: InMemoryApplicationStore, record: ApplicantRecord, request_id: str) -> None:
    """Keep a copy of the submission; failures never reach the applicant"""
    try:
        key = store.save(record)
    except Exception:
        logger.exception("Failed to save application", extra={"request_id": request_id})
        return
    logger.info("Application saved", extra={"request_id": request_id, "application_key": key})


@router.post(
    "/submit",
    response_model=SubmitResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Receive and evaluate an applicant's financial information",
)
def submit(
    request_body: ApplicantRequest,
    background_tasks: BackgroundTasks,
    request: Request,
    verifier: DocumentVerifier = Depends(get_document_verifier),
    oracle: PriceOracle = Depends(get_price_oracle),
    store: InMemoryApplicationStore = Depends(get_application_store),
    today: date = Depends(get_today),
):
    """
    Evaluate an applicant's loan eligibility.

    Flow:
    1. Body is validated against ApplicantRequest (failures handled in api.errors)
    2. Verify license, check age, compare assets to liabilities
    3. Save the application in the background
    4. Return {"message": "success", "approved": ...}
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        record = request_body.to_record()
        decision = evaluate(record, verifier=verifier, oracle=oracle, today=today)

    except ApplicantValidationError as e:
        record_error(e.code)
        log_rejection(request_id, e.code)
        return error_response(e.code)

    except Exception as e:
        record_error(INTERNAL_SERVER_ERROR)
        logger.error(f"Unexpected error: {e}", exc_info=True, extra={"request_id": request_id})
        return error_response(INTERNAL_SERVER_ERROR)

    background_tasks.add_task(save_application, store, record, request_id)

    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.approved)
    log_decision(request_id, decision.approved, decision.total_assets, decision.total_liabilities, duration_ms)

    return success_response(decision)
