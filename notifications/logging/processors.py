"""Custom structlog processors for request context and service metadata."""

import os
import threading

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger

from notifications.logging.context import get_caller_fields, get_request_id

LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

# Fields already shown in the console prefix, or too noisy for a terminal
CONSOLE_EXCLUDED_FIELDS = frozenset(
    {
        "level",
        "timestamp",
        "request_id",
        "logger",
        "event",
        "process_id",
        "thread_id",
        "service_name",
        "environment",
    }
)


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the request id and authenticated caller to log events.

    Fields the event already carries win, so a service logging about
    another user keeps its own ``user_id``.

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        The event dictionary with request_id, user_id and caller_role added
        when known.
    """
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    for key, value in get_caller_fields().items():
        event_dict.setdefault(key, value)
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service_name and environment to all log events."""
    event_dict["service_name"] = os.getenv(
        "SERVICE_NAME", "campus-notification-service"
    )
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add process_id and thread_id to log events."""
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render log events as colored strings for console output.

    Format: [LEVEL] timestamp | request_id | logger_name | message key=value

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        A formatted, colored string for console output.
    """
    init(autoreset=True)

    level = event_dict.get("level", "INFO").upper()
    timestamp = event_dict.get("timestamp", "")
    request_id = event_dict.get("request_id", "no-request-id")
    logger_name = event_dict.get("logger", "root")
    message = event_dict.get("event", "")

    level_color = LEVEL_COLORS.get(level, Fore.WHITE)

    formatted = (
        f"{level_color}[{level:<8}]{Style.RESET_ALL} "
        f"{Fore.WHITE}{timestamp}{Style.RESET_ALL} | "
        f"{Fore.MAGENTA}{request_id}{Style.RESET_ALL} | "
        f"{Fore.BLUE}{logger_name}{Style.RESET_ALL} | "
        f"{message}"
    )

    extra_fields = {
        k: v for k, v in event_dict.items() if k not in CONSOLE_EXCLUDED_FIELDS
    }
    if extra_fields:
        extra_str = " ".join(f"{k}={v}" for k, v in extra_fields.items())
        formatted += f" {Fore.YELLOW}{extra_str}{Style.RESET_ALL}"

    return formatted
