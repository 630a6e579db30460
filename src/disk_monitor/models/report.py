"""Result of evaluating a snapshot against the monitor configuration."""

from dataclasses import dataclass

from disk_monitor.models.enums import OutputStyle, SeverityLevel
from disk_monitor.models.snapshot import UsageSnapshot


# Presentation style for each severity level
SEVERITY_STYLES = {
    SeverityLevel.CRITICAL: OutputStyle.FAILURE,
    SeverityLevel.WARNING: OutputStyle.WARNING,
    SeverityLevel.HEALTHY: OutputStyle.SUCCESS,
}


@dataclass(frozen=True)
class DiskStatusReport:
    """Header and rendered message to show for one check."""

    level: SeverityLevel
    header: str
    message: str
    snapshot: UsageSnapshot

    @property
    def style(self) -> OutputStyle:
        """Presentation style matching the severity level."""
        return SEVERITY_STYLES[self.level]

    @property
    def is_alert(self) -> bool:
        """Check if the report is a warning or critical notification."""
        return self.level != SeverityLevel.HEALTHY
