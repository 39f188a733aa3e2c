"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger import jsonlogger

from loan_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(
    request_id: str,
    approved: bool,
    total_assets: float,
    total_liabilities: float,
    duration_ms: float,
) -> None:
    """Log structured decision outcome for analysis"""
    logging.info(
        "Eligibility decided",
        extra={
            "request_id": request_id,
            "step": "decision_complete",
            "approval_outcome": "approved" if approved else "declined",
            "total_assets": total_assets,
            "total_liabilities": total_liabilities,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, code: str, all_codes: List[str] | None = None) -> None:
    """Log a request answered with a field-level error code"""
    logging.warning(
        "Submission rejected",
        extra={
            "request_id": request_id,
            "step": "validation",
            "error_code": code,
            "all_error_codes": all_codes or [code],
        },
    )
