"""Disk usage provider backed by shutil.disk_usage.

Produces UsageSnapshot values with df -h style sizes. Usage percentage follows
the df definition: used / (used + available), so space reserved for root is
not counted as available.
"""

import math
import shutil
from os import PathLike
from typing import Callable, Union

from disk_monitor.logging import get_logger
from disk_monitor.models.snapshot import UsageSnapshot

log = get_logger(__name__)

_UNITS = ("K", "M", "G", "T", "P", "E")

# Signature of any disk usage provider accepted by DiskSpaceMonitor
UsageProvider = Callable[[str], UsageSnapshot]


class DiskUsageError(Exception):
    """Raised when disk usage cannot be determined for a path."""

    pass


def format_size(num_bytes: int) -> str:
    """Format a byte count like df -h (binary units, rounded up).

    Values below 10 units keep one decimal place.

    Examples:
        >>> format_size(512)
        '512'
        >>> format_size(1536)
        '1.5K'
        >>> format_size(150 * 1024**3)
        '150G'
    """
    if num_bytes < 1024:
        return str(max(num_bytes, 0))

    value = float(num_bytes)
    index = -1
    while index < len(_UNITS) - 1 and (index < 0 or value >= 1024):
        value /= 1024
        index += 1
    unit = _UNITS[index]

    if value < 10:
        rounded = math.ceil(value * 10) / 10
        if rounded < 10:
            return f"{rounded:.1f}{unit}"

    whole = math.ceil(value)
    # Rounding up can reach the next unit (1023.1K -> 1.0M)
    if whole >= 1024 and index < len(_UNITS) - 1:
        return f"1.0{_UNITS[index + 1]}"
    return f"{whole}{unit}"


def usage_percent(used: int, free: int) -> float:
    """Percentage of usable space in use, 0.0 for an empty filesystem."""
    usable = used + free
    if usable <= 0:
        return 0.0
    return used / usable * 100.0


def get_disk_usage(path: Union[str, PathLike]) -> UsageSnapshot:
    """Read disk usage for the filesystem containing path.

    Args:
        path: Any path on the filesystem to inspect

    Returns:
        UsageSnapshot with percentage and formatted sizes

    Raises:
        DiskUsageError: If the path cannot be stat'ed
    """
    try:
        usage = shutil.disk_usage(path)
    except OSError as e:
        raise DiskUsageError(f"Cannot read disk usage for {path}: {e}") from e

    snapshot = UsageSnapshot(
        usage_percent=usage_percent(usage.used, usage.free),
        used=format_size(usage.used),
        available=format_size(usage.free),
        total=format_size(usage.total),
    )
    log.debug(
        "disk_usage_read",
        path=str(path),
        usage_percent=round(snapshot.usage_percent, 1),
        available=snapshot.available,
    )
    return snapshot
