"""Disk usage providers."""

from disk_monitor.collectors.disk import (
    DiskUsageError,
    UsageProvider,
    format_size,
    get_disk_usage,
    usage_percent,
)

__all__ = [
    "DiskUsageError",
    "UsageProvider",
    "format_size",
    "get_disk_usage",
    "usage_percent",
]
