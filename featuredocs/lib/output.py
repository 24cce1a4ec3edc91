"""Console output helpers for featuredocs commands.

Separates display concerns from document operations.
"""

import sys

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "red": "\033[0;31m",
    "green": "\033[0;32m",
    "yellow": "\033[1;33m",
}


class Console:
    """Prints ✓ / ⚠ / error lines, optionally colorized."""

    def __init__(self, colorize: bool = True):
        self.colorize = colorize

    def _c(self, name: str) -> str:
        return COLORS[name] if self.colorize else ""

    def ok(self, message: str) -> None:
        print(f"{self._c('green')}✓{self._c('reset')} {message}")

    def warn(self, message: str) -> None:
        print(f"{self._c('yellow')}⚠{self._c('reset')}  {message}")

    def error(self, message: str) -> None:
        print(f"{self._c('red')}Error: {message}{self._c('reset')}", file=sys.stderr)

    def highlight(self, label: str, message: str) -> None:
        print(f"  {self._c('yellow')}[{label}]{self._c('reset')} {message}")

    def line(self, message: str = "") -> None:
        print(message)
