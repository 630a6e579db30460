"""Pydantic settings models for disk monitor configuration."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WARNING_MESSAGE = "Disk space: {percent}% used ({available} available)"
DEFAULT_CRITICAL_MESSAGE = (
    "⚠️  CRITICAL: Disk nearly full - {percent}% used (only {available} remaining)"
)


class _Section(BaseModel):
    """Base for configuration sections.

    Sections are immutable once loaded. Documentation keys carried by the
    config file ("description", "reasoning") are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


class ThresholdSettings(_Section):
    """Usage percentages that trigger warning and critical notifications.

    critical_percent is expected to be >= warning_percent but this is not
    enforced; see SEVERITY_PRECEDENCE in the classifier.
    """

    warning_percent: float = Field(
        default=80.0,
        ge=0.0,
        le=100.0,
        description="Usage percentage for the warning level",
    )
    critical_percent: float = Field(
        default=95.0,
        ge=0.0,
        le=100.0,
        description="Usage percentage for the critical level",
    )


class DisplaySettings(_Section):
    """Notification header and healthy-state display preferences."""

    header_icon: str = Field(default="💾", description="Icon for the status header")
    header_text: str = Field(
        default="Disk Space Status", description="Text for the status header"
    )
    show_when_healthy: bool = Field(
        default=False, description="Show a message when usage is below thresholds"
    )
    healthy_message: str = Field(
        default=DEFAULT_WARNING_MESSAGE,
        description="Template shown when healthy and show_when_healthy is set",
    )

    @property
    def header(self) -> str:
        """Full header line (icon followed by text)."""
        return f"{self.header_icon} {self.header_text}"


class MessageSettings(_Section):
    """Message templates for the warning and critical levels."""

    warning: str = Field(default=DEFAULT_WARNING_MESSAGE)
    critical: str = Field(default=DEFAULT_CRITICAL_MESSAGE)


class BehaviorSettings(_Section):
    """Behavior switches."""

    enabled: bool = Field(default=True, description="Master enable/disable switch")
    check_on_session_start: bool = Field(
        default=True,
        description="Run the check when invoked as a session-start hook",
    )


class DiskMonitorConfig(_Section):
    """Complete disk monitor configuration.

    Constructed once (usually by load_config) and passed to DiskSpaceMonitor.
    Absent sections and keys take the documented defaults.
    """

    thresholds: ThresholdSettings = Field(default_factory=ThresholdSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    messages: MessageSettings = Field(default_factory=MessageSettings)
    behavior: BehaviorSettings = Field(default_factory=BehaviorSettings)


# Used whenever the config file is absent or invalid
DEFAULT_CONFIG = DiskMonitorConfig()


class RuntimeSettings(BaseSettings):
    """Process-level settings read from DISK_MONITOR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DISK_MONITOR_",
        extra="ignore",
    )

    config_path: Optional[str] = Field(
        default=None,
        description="Override for the monitor configuration file path",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format: json or text",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}
        normalized = v.upper()
        if normalized == "WARN":
            normalized = "WARNING"
        if normalized not in valid_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: DEBUG, INFO, WARNING, ERROR"
            )
        return normalized
