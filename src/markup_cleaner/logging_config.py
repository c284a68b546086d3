# -*- coding: utf-8 -*-
"""
Structured JSON logging configuration.

Each line carries the service name, the request id (or "-") and whatever the
caller passed in ``extra``: pipeline steps log a ``stage`` field with their
counts, the API logs sizes and timings.
"""
import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from . import __version__
from .config import settings
from .middleware import get_request_id

SERVICE_NAME = "markup-cleaner"


class RequestContextFilter(logging.Filter):
    """Attach the current request id to log records."""

    def filter(self, record):
        record.request_id = get_request_id() or "-"
        return True


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter naming the service and the pipeline stage."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["request_id"] = getattr(record, "request_id", "-")
        # Records from outside the pipeline have no stage
        log_record.setdefault("stage", None)


def build_formatter() -> ServiceJsonFormatter:
    return ServiceJsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        static_fields={"service": SERVICE_NAME, "version": __version__},
    )


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure structured JSON logging on stdout.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    handler.addFilter(RequestContextFilter())
    root_logger.addHandler(handler)

    # Reduce noise from the ASGI server and the tree builder
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("bs4").setLevel(logging.WARNING)

    return root_logger
