"""Presentation of disk status notifications."""

from disk_monitor.delivery.console import (
    ConsolePresenter,
    Presenter,
    RecordingPresenter,
)

__all__ = [
    "ConsolePresenter",
    "Presenter",
    "RecordingPresenter",
]
