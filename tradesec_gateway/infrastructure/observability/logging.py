"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List
from pythonjsonlogger import jsonlogger

from tradesec_gateway.config import settings


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


def log_receivable_submitted(
    request_id: str,
    currency: str,
    category: str,
    due_diligence_sections: List[str],
) -> None:
    """Log a confirmed receivable submission"""
    logging.info(
        "Receivable submitted",
        extra={
            "request_id": request_id,
            "step": "receivable_submitted",
            "currency": currency,
            "category": category,
            "due_diligence_sections": due_diligence_sections,
        },
    )


def log_payment_submitted(request_id: str, payment_method: str, amount: str) -> None:
    """Log a confirmed security purchase"""
    logging.info(
        "Payment submitted",
        extra={
            "request_id": request_id,
            "step": "payment_submitted",
            "payment_method": payment_method,
            "amount": amount,
        },
    )


def log_confirm_rejected(request_id: str, form: str, fields: List[str]) -> None:
    """Log a confirm blocked by validation"""
    logging.warning(
        "Confirm rejected",
        extra={
            "request_id": request_id,
            "step": f"{form}_rejected",
            "invalid_fields": fields,
        },
    )
