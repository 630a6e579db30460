"""
Disk Monitor - Workspace disk space warnings for session-start hooks.

This package checks the disk usage of a workspace against configurable
thresholds and prints a short notification when usage is high. It never
fails its caller: missing configuration falls back to defaults, and an
unreadable disk produces no output.

Features:
- JSONC (or YAML) configuration with fallback to built-in defaults
- Warning and critical thresholds with configurable message templates
- Structured logging to stderr (JSON or text)
"""

__version__ = "2.0.0"
__all__ = ["__version__"]
