"""Console output with theme support.

Results meant for scripts go through click.echo; this console carries the
human-facing status lines (errors, warnings, batch summaries) and writes
plain text when the stream is not a terminal.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with their symbol and theme style."""
    SUCCESS = ("[✓]", "success")
    ERROR = ("[x]", "error")
    WARNING = ("[!]", "warning")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    warning: str
    error: str
    success: str


THEMES = {
    'manhattan': ThemeColors(
        warning='yellow',
        error='red',
        success='green',
    ),
    'green': ThemeColors(
        warning='yellow',
        error='red',
        success='bright_green',
    ),
    'sunset': ThemeColors(
        warning='yellow',
        error='red3',
        success='green',
    ),
}


class ConsoleBase:
    """Console wrapper with theme support and plain-text output for non-terminals."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output stream (defaults to sys.stderr)
            force_plain: Force plain output even on a terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stderr
        self.use_rich = not force_plain and self._should_use_rich_terminal()

        if self.use_rich:
            self.console = Console(
                theme=self._create_rich_theme(),
                file=self.file,
                force_terminal=True,
                highlight=False,
            )
        else:
            self.console = None

    def _should_use_rich_terminal(self) -> bool:
        """Terminal detection for Rich output."""
        if os.environ.get('NO_COLOR'):
            return False
        if os.environ.get('FORCE_COLOR'):
            return True
        return hasattr(self.file, 'isatty') and self.file.isatty()

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
        })

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, style = status.value

        if self.use_rich:
            status_text = Text()
            status_text.append(f"{icon} ", style=style)
            status_text.append(message)
            self.console.print(status_text)
        else:
            print(f"{icon} {message}", file=self.file)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.print_status(StatusType.WARNING, message)
