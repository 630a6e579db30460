"""Configuration loading with JSONC/YAML parsing and fallback to defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from disk_monitor.config.jsonc import strip_jsonc_comments
from disk_monitor.config.settings import DEFAULT_CONFIG, DiskMonitorConfig
from disk_monitor.logging import get_logger

log = get_logger(__name__)

CONFIG_SUBPATH = Path(".claude", "cpi-si", "system", "data", "config", "session")
CONFIG_FILENAME = "disk-monitoring.jsonc"

YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be located, read or parsed."""

    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when the configuration file does not exist (the normal case)."""

    pass


def default_config_path() -> Path:
    """Resolve the well-known configuration path under $HOME.

    Raises:
        ConfigurationError: If HOME is not set.
    """
    home = os.environ.get("HOME")
    if not home:
        raise ConfigurationError("HOME is not set; cannot locate configuration file")
    return Path(home) / CONFIG_SUBPATH / CONFIG_FILENAME


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read and parse a configuration document.

    JSONC is the primary format; files with a .yaml or .yml suffix are
    parsed as YAML.

    Args:
        path: Configuration file path

    Returns:
        Parsed top-level mapping.

    Raises:
        ConfigurationError: If the file is missing, unreadable, malformed,
            or its top level is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")
    except PermissionError:
        raise ConfigurationError(f"Cannot read configuration file {path}: permission denied")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}")

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(strip_jsonc_comments(text))
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid configuration file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration file {path}: top level must be an object"
        )
    return data


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Format Pydantic validation errors into short readable messages."""
    messages: List[str] = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        input_val = error.get("input")

        if input_val is not None and not isinstance(input_val, dict):
            messages.append(f"'{loc}' {msg}, got: {input_val}")
        else:
            messages.append(f"'{loc}' {msg}")

    return messages


def load_config(config_path: Optional[Union[str, Path]] = None) -> DiskMonitorConfig:
    """Load and validate the disk monitor configuration.

    Never raises. Any failure (unresolvable path, missing or unreadable
    file, parse error, invalid values) returns DEFAULT_CONFIG as a whole;
    there is no partial merge of a broken document with the defaults.

    Args:
        config_path: Optional explicit path. Defaults to the file under $HOME.

    Returns:
        Validated, immutable DiskMonitorConfig.
    """
    try:
        path = Path(config_path) if config_path else default_config_path()
        data = read_config_file(path)
    except ConfigFileNotFoundError as e:
        log.debug("config_file_not_found", error=str(e), fallback="defaults")
        return DEFAULT_CONFIG
    except ConfigurationError as e:
        log.warning("config_unavailable", error=str(e), fallback="defaults")
        return DEFAULT_CONFIG

    try:
        config = DiskMonitorConfig.model_validate(data)
    except ValidationError as e:
        log.warning(
            "config_invalid",
            path=str(path),
            errors=format_validation_errors(e.errors()),
            fallback="defaults",
        )
        return DEFAULT_CONFIG

    log.debug("config_loaded", path=str(path))
    return config
