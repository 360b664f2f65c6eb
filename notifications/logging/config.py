"""Structlog configuration for dual output: JSON files and colored console."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from notifications.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

MAX_LOG_FILE_BYTES = 50 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 20


def setup_logging() -> None:
    """Configure structlog with JSON file logs and colored console logs.

    File output is JSON with all metadata through a rotating handler.
    Console output is the colored one-line format from ``console_renderer``.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/campus-notifications.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME: Service name for metadata
    - ENVIRONMENT: Deployment environment (default: development)
    """
    log_file_path = os.getenv("LOG_FILE_PATH", "./logs/campus-notifications.log")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_request_context,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Stdlib records (Django, middleware) go through the same pre-chain
    foreign_pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]

    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[
                *foreign_pre_chain,
                add_service_context,
                add_process_info,
            ],
        )
    )
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=foreign_pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=log_file_path,
        log_level=log_level,
    )
