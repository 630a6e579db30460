"""Shared fixtures for disk monitor tests."""

import pytest

from disk_monitor.config import DiskMonitorConfig
from disk_monitor.delivery import RecordingPresenter
from disk_monitor.models import UsageSnapshot


def _build_snapshot(
    usage_percent: float,
    used: str = "150G",
    available: str = "50G",
    total: str = "200G",
) -> UsageSnapshot:
    return UsageSnapshot(
        usage_percent=usage_percent,
        used=used,
        available=available,
        total=total,
    )


@pytest.fixture
def make_snapshot():
    """Factory for UsageSnapshot values with realistic size strings."""
    return _build_snapshot


@pytest.fixture
def presenter() -> RecordingPresenter:
    """Presenter that records emitted lines."""
    return RecordingPresenter()


@pytest.fixture
def default_config() -> DiskMonitorConfig:
    """Configuration with all default values."""
    return DiskMonitorConfig()
