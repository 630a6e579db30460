"""Terminal presentation of disk status notifications."""

from typing import Dict, List, Optional, Protocol, Tuple

from rich.console import Console
from rich.text import Text

from disk_monitor.models.enums import OutputStyle

# Status icons prefixed to non-header lines
STYLE_ICONS: Dict[OutputStyle, str] = {
    OutputStyle.SUCCESS: "✓",
    OutputStyle.WARNING: "⚠",
    OutputStyle.FAILURE: "✗",
}

STYLE_COLORS: Dict[OutputStyle, str] = {
    OutputStyle.HEADER: "bold cyan",
    OutputStyle.SUCCESS: "green",
    OutputStyle.WARNING: "yellow",
    OutputStyle.FAILURE: "bold red",
}

MESSAGE_INDENT = "   "


class Presenter(Protocol):
    """Anything that can show a line of text with a style tag."""

    def emit(self, text: str, style: OutputStyle) -> None:
        ...


class ConsolePresenter:
    """Render notification lines to the terminal with rich.

    Text is printed with markup disabled, so square brackets in user
    templates are shown literally.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the presenter.

        Args:
            console: rich Console to print to. Defaults to stdout.
        """
        self.console = console or Console(highlight=False)

    def format_line(self, text: str, style: OutputStyle) -> Text:
        """Build the styled rich Text for one line."""
        if style == OutputStyle.HEADER:
            return Text(text, style=STYLE_COLORS[style])
        return Text(
            f"{MESSAGE_INDENT}{STYLE_ICONS[style]} {text}",
            style=STYLE_COLORS[style],
        )

    def emit(self, text: str, style: OutputStyle) -> None:
        """Print one styled line."""
        if not text:
            return
        self.console.print(self.format_line(text, style), markup=False, soft_wrap=True)


class RecordingPresenter:
    """Presenter that keeps emitted lines in memory.

    Useful for embedding the monitor in another tool that does its own
    output, and for tests.
    """

    def __init__(self) -> None:
        self.lines: List[Tuple[OutputStyle, str]] = []

    def emit(self, text: str, style: OutputStyle) -> None:
        self.lines.append((style, text))

    def clear(self) -> None:
        self.lines.clear()
