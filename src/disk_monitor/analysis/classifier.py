"""Severity classification of disk usage against configured thresholds.

All thresholds use >= comparison (value at the threshold triggers the level).
"""

from typing import Tuple

from disk_monitor.config.settings import ThresholdSettings
from disk_monitor.models.enums import SeverityLevel

# Levels are tested most severe first. With a misconfigured threshold set
# (critical_percent <= warning_percent) a reading that satisfies both
# resolves to CRITICAL.
SEVERITY_PRECEDENCE: Tuple[SeverityLevel, ...] = (
    SeverityLevel.CRITICAL,
    SeverityLevel.WARNING,
)


def _threshold_for(level: SeverityLevel, thresholds: ThresholdSettings) -> float:
    if level == SeverityLevel.CRITICAL:
        return thresholds.critical_percent
    return thresholds.warning_percent


def classify(usage_percent: float, thresholds: ThresholdSettings) -> SeverityLevel:
    """Classify a usage percentage.

    Args:
        usage_percent: Filesystem usage percentage
        thresholds: Warning and critical thresholds

    Returns:
        The first level in SEVERITY_PRECEDENCE whose threshold is reached,
        or HEALTHY if none is.
    """
    for level in SEVERITY_PRECEDENCE:
        if usage_percent >= _threshold_for(level, thresholds):
            return level
    return SeverityLevel.HEALTHY
