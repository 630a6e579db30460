"""Disk space check for session-start hooks.

DiskSpaceMonitor reads disk usage for a workspace, classifies it against the
configured thresholds and shows a notification when usage is high. It is a
notification only: check() never raises, and any failure results in no
output.
"""

from typing import Optional

from disk_monitor.analysis.classifier import classify
from disk_monitor.analysis.renderer import render
from disk_monitor.collectors.disk import UsageProvider, get_disk_usage
from disk_monitor.config.settings import DiskMonitorConfig
from disk_monitor.delivery.console import ConsolePresenter, Presenter
from disk_monitor.logging import get_logger
from disk_monitor.models.enums import OutputStyle, SeverityLevel
from disk_monitor.models.report import DiskStatusReport
from disk_monitor.models.snapshot import UsageSnapshot

log = get_logger(__name__)


class DiskSpaceMonitor:
    """Single-shot disk space evaluator.

    The configuration is passed in once and never modified, so one monitor
    can be shared freely.
    """

    def __init__(
        self,
        config: DiskMonitorConfig,
        presenter: Optional[Presenter] = None,
        usage_provider: Optional[UsageProvider] = None,
    ) -> None:
        """Initialize the monitor.

        Args:
            config: Loaded monitor configuration
            presenter: Output target. Defaults to a ConsolePresenter on stdout.
            usage_provider: Callable returning a UsageSnapshot for a path.
                Defaults to get_disk_usage.
        """
        self._config = config
        self._presenter = presenter or ConsolePresenter()
        self._usage_provider = usage_provider or get_disk_usage

    @property
    def config(self) -> DiskMonitorConfig:
        return self._config

    def _template_for(self, level: SeverityLevel) -> str:
        if level == SeverityLevel.CRITICAL:
            return self._config.messages.critical
        if level == SeverityLevel.WARNING:
            return self._config.messages.warning
        return self._config.display.healthy_message

    def evaluate(self, snapshot: UsageSnapshot) -> Optional[DiskStatusReport]:
        """Decide what to show for a snapshot.

        Args:
            snapshot: Disk usage reading

        Returns:
            DiskStatusReport to display, or None when usage is healthy and
            healthy messages are not shown.
        """
        level = classify(snapshot.usage_percent, self._config.thresholds)
        if level == SeverityLevel.HEALTHY and not self._config.display.show_when_healthy:
            return None

        return DiskStatusReport(
            level=level,
            header=self._config.display.header,
            message=render(self._template_for(level), snapshot),
            snapshot=snapshot,
        )

    def check(self, workspace: str) -> None:
        """Check disk usage for a workspace and show a notification if needed.

        Does nothing when the monitor is disabled or when disk usage cannot
        be read.

        Args:
            workspace: Path on the filesystem to check
        """
        if not self._config.behavior.enabled:
            log.debug("disk_check_disabled", workspace=workspace)
            return

        try:
            snapshot = self._usage_provider(workspace)
        except Exception as e:
            log.warning("disk_usage_unavailable", workspace=workspace, error=str(e))
            return

        report = self.evaluate(snapshot)
        if report is None:
            log.debug(
                "disk_space_healthy",
                workspace=workspace,
                usage_percent=snapshot.usage_percent,
            )
            return

        log_event = log.info if report.is_alert else log.debug
        log_event(
            "disk_space_notification",
            workspace=workspace,
            level=report.level.value,
            usage_percent=snapshot.usage_percent,
        )
        try:
            self._presenter.emit(report.header, OutputStyle.HEADER)
            self._presenter.emit(report.message, report.style)
        except Exception as e:
            log.warning("disk_notification_failed", workspace=workspace, error=str(e))
