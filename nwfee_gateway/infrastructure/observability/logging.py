"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.utcnow().isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "nwfee-gateway"


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


def log_assessment(
    request_id: str,
    ruleset_id: str,
    card_type: str,
    matched_fee_keys: list[str],
    fee_total: str,
    duration_ms: float,
) -> None:
    """Log structured fee assessment outcome for analysis"""
    logging.info(
        "Fee assessment completed",
        extra={
            "request_id": request_id,
            "ruleset_id": ruleset_id,
            "step": "assessment_complete",
            "card_type": card_type,
            "matched_fee_keys": matched_fee_keys,
            "fee_total": fee_total,
            "duration_ms": duration_ms,
        },
    )
