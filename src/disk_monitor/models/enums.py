"""Shared enumerations for the disk monitor models."""

from enum import Enum


class SeverityLevel(str, Enum):
    """Outcome of classifying a disk usage reading."""

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


class OutputStyle(str, Enum):
    """Style tag accepted by presenters."""

    HEADER = "header"
    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"
