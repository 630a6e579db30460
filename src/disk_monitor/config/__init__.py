"""Configuration management for the disk monitor."""

from disk_monitor.config.jsonc import strip_jsonc_comments
from disk_monitor.config.loader import (
    ConfigFileNotFoundError,
    ConfigurationError,
    default_config_path,
    load_config,
    read_config_file,
)
from disk_monitor.config.settings import (
    DEFAULT_CONFIG,
    BehaviorSettings,
    DiskMonitorConfig,
    DisplaySettings,
    MessageSettings,
    RuntimeSettings,
    ThresholdSettings,
)

__all__ = [
    "BehaviorSettings",
    "ConfigFileNotFoundError",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DiskMonitorConfig",
    "DisplaySettings",
    "MessageSettings",
    "RuntimeSettings",
    "ThresholdSettings",
    "default_config_path",
    "load_config",
    "read_config_file",
    "strip_jsonc_comments",
]
