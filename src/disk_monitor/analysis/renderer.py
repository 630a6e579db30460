"""Placeholder substitution for notification message templates.

Templates may contain {percent}, {available}, {used} and {total}. Any other
brace-delimited text is left exactly as written.
"""

import re
from typing import Dict

from disk_monitor.models.snapshot import UsageSnapshot

PLACEHOLDERS = ("percent", "available", "used", "total")

_PLACEHOLDER_PATTERN = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")


def placeholder_values(snapshot: UsageSnapshot) -> Dict[str, str]:
    """Map each placeholder name to its value for a snapshot."""
    return {
        "percent": f"{snapshot.usage_percent:.0f}",
        "available": snapshot.available,
        "used": snapshot.used,
        "total": snapshot.total,
    }


def render(template: str, snapshot: UsageSnapshot) -> str:
    """Substitute snapshot values into a message template.

    Every occurrence of each placeholder is replaced in a single pass, so
    substituted values are never scanned for placeholders themselves.

    Args:
        template: Message template
        snapshot: Disk usage reading

    Returns:
        Rendered message
    """
    values = placeholder_values(snapshot)
    return _PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(1)], template)
