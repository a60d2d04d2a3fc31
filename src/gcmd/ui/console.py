"""Console output formatting utilities for gcmd."""

from __future__ import annotations

import sys
from typing import Iterable, Optional


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show debug lines and stack traces
        """
        self.debug = debug

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_lines(self, lines: Iterable[str]) -> None:
        """Print one item per line."""
        for line in lines:
            print(line)

    def print_error(self, message: str) -> None:
        """Print a single-line error on stderr."""
        print(message, file=sys.stderr)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
