"""Tests for the shutil-based disk usage provider."""

import shutil
from collections import namedtuple
from unittest.mock import patch

import pytest

from disk_monitor.collectors.disk import (
    DiskUsageError,
    format_size,
    get_disk_usage,
    usage_percent,
)
from disk_monitor.models import UsageSnapshot

GiB = 1024**3
DiskUsage = namedtuple("DiskUsage", ["total", "used", "free"])


class TestFormatSize:
    """df -h style formatting."""

    @pytest.mark.parametrize(
        "num_bytes,expected",
        [
            (0, "0"),
            (512, "512"),
            (1024, "1.0K"),
            (1536, "1.5K"),
            (10 * 1024, "10K"),
            (int(9.5 * GiB), "9.5G"),
            (150 * GiB, "150G"),
            (2 * 1024 * GiB, "2.0T"),
        ],
    )
    def test_format(self, num_bytes, expected):
        assert format_size(num_bytes) == expected

    def test_rounds_up(self):
        """Sizes round up like df, never down."""
        assert format_size(1025) == "1.1K"
        assert format_size(150 * GiB + 1) == "151G"

    def test_rounding_past_ten_drops_decimal(self):
        assert format_size(int(9.99 * GiB)) == "10G"

    @pytest.mark.parametrize(
        "num_bytes,expected",
        [
            (1024**2 - 1, "1.0M"),
            (1024**3 - 1, "1.0G"),
            (1024**4 - 1, "1.0T"),
        ],
    )
    def test_rounding_past_unit_moves_to_next_unit(self, num_bytes, expected):
        """Like df -h, 1023.1K is shown as 1.0M rather than 1024K."""
        assert format_size(num_bytes) == expected


class TestUsagePercent:
    def test_used_over_usable(self):
        assert usage_percent(used=75, free=25) == pytest.approx(75.0)

    def test_empty_filesystem(self):
        assert usage_percent(used=0, free=0) == 0.0

    def test_full_filesystem(self):
        assert usage_percent(used=100, free=0) == pytest.approx(100.0)


class TestGetDiskUsage:
    def test_snapshot_from_disk_usage(self):
        fake = DiskUsage(total=200 * GiB, used=180 * GiB, free=10 * GiB)
        with patch("disk_monitor.collectors.disk.shutil.disk_usage", return_value=fake) as mock:
            snapshot = get_disk_usage("/workspace")

        mock.assert_called_once_with("/workspace")
        assert snapshot.usage_percent == pytest.approx(180 / 190 * 100)
        assert snapshot.used == "180G"
        assert snapshot.available == "10G"
        assert snapshot.total == "200G"

    def test_real_path(self, tmp_path):
        snapshot = get_disk_usage(str(tmp_path))

        assert isinstance(snapshot, UsageSnapshot)
        assert 0.0 <= snapshot.usage_percent <= 100.0
        assert snapshot.total

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(DiskUsageError):
            get_disk_usage(str(tmp_path / "missing"))

    def test_os_error_wrapped(self):
        with patch.object(shutil, "disk_usage", side_effect=PermissionError("denied")):
            with pytest.raises(DiskUsageError, match="denied"):
                get_disk_usage("/root/secret")
