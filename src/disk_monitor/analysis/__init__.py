"""Threshold classification and message rendering."""

from disk_monitor.analysis.classifier import SEVERITY_PRECEDENCE, classify
from disk_monitor.analysis.renderer import PLACEHOLDERS, placeholder_values, render

__all__ = [
    "PLACEHOLDERS",
    "SEVERITY_PRECEDENCE",
    "classify",
    "placeholder_values",
    "render",
]
