"""
Entry point for the disk-monitor CLI.

Usage:
    disk-monitor [WORKSPACE]                 Check disk usage for WORKSPACE (default: .)
    disk-monitor --session-start [WORKSPACE] Check as a session-start hook
    disk-monitor --config PATH [WORKSPACE]   Use a specific configuration file
    disk-monitor --help                      Show help message
    disk-monitor --version                   Show version and exit

Exit Codes:
    0 - Always. The check is a notification and never fails its caller.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from disk_monitor import __version__

EXIT_SUCCESS = 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="disk-monitor",
        description="Warn when workspace disk usage crosses configured thresholds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration:
  $HOME/.claude/cpi-si/system/data/config/session/disk-monitoring.jsonc
  (JSONC; .yaml/.yml files are also accepted via --config). Missing or
  invalid configuration falls back to built-in defaults.

Environment Variables:
  DISK_MONITOR_CONFIG_PATH   Path to configuration file
  DISK_MONITOR_LOG_LEVEL     Logging level: DEBUG, INFO, WARNING, ERROR
  DISK_MONITOR_LOG_FORMAT    Log format: json or text

Examples:
  # Check the current directory
  disk-monitor

  # Session-start hook for a project
  disk-monitor --session-start /path/to/project
""",
    )
    parser.add_argument(
        "workspace",
        nargs="?",
        default=".",
        help="Path whose filesystem is checked (default: current directory)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="Configuration file (overrides DISK_MONITOR_CONFIG_PATH)",
    )
    parser.add_argument(
        "--session-start",
        action="store_true",
        help="Invoked as a session-start hook; honours behavior.check_on_session_start",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level for diagnostics on stderr",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        default=None,
        help="Log output format",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for disk-monitor.

    Returns:
        Exit code (always 0)
    """
    args = parse_args(argv)

    from disk_monitor.config import RuntimeSettings, load_config
    from disk_monitor.logging import configure_logging, get_logger
    from disk_monitor.monitor import DiskSpaceMonitor

    try:
        runtime = RuntimeSettings()
    except ValidationError as e:
        print(f"Ignoring invalid DISK_MONITOR_* settings: {e}", file=sys.stderr)
        runtime = RuntimeSettings.model_construct()

    configure_logging(
        log_format=args.log_format or runtime.log_format,
        log_level=args.log_level or runtime.log_level,
    )
    log = get_logger("disk_monitor")

    try:
        config = load_config(args.config or runtime.config_path)

        if args.session_start and not config.behavior.check_on_session_start:
            log.debug("session_start_check_skipped", workspace=args.workspace)
            return EXIT_SUCCESS

        DiskSpaceMonitor(config).check(args.workspace)
    except Exception as e:
        log.error("disk_check_failed", workspace=args.workspace, error=str(e))

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
