"""Data models for the disk monitor."""

from .enums import OutputStyle, SeverityLevel
from .report import DiskStatusReport, SEVERITY_STYLES
from .snapshot import UsageSnapshot

__all__ = [
    "DiskStatusReport",
    "OutputStyle",
    "SEVERITY_STYLES",
    "SeverityLevel",
    "UsageSnapshot",
]
