"""Rich console reporter."""

from __future__ import annotations

from rich.console import Console


class RichReporter:
    """Print user-facing messages in color.

    Markup is disabled so literal brackets such as ``[Failed]`` survive.
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self._console = console or Console()
        self._error_console = error_console or Console(stderr=True)

    def info(self, message: str) -> None:
        self._console.print(message, style="green", markup=False, highlight=False, soft_wrap=True)

    def success(self, message: str) -> None:
        self._console.print(message, style="bold green", markup=False, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self._error_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
