"""Notification severity enumeration."""

from enum import Enum


class Severity(str, Enum):
    """Severity of a notification, exposed on the wire as ``type``."""

    INFO = "Info"
    WARNING = "Warning"
    SUCCESS = "Success"
