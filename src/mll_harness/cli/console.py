"""Diagnostic console for stderr, rendered with Rich when installed.

Rich is imported lazily so the harness keeps working without it.  The
vector lines on stdout never go through this module.
"""

from __future__ import annotations

import sys
from typing import Any

from mll_harness.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


class _ConsoleProxy:
    """``print``-compatible stderr writer with a plain-text fallback."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def debug(self, message: str) -> None:
        """Print a dimmed diagnostic line."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(f"debug: {message}", file=sys.stderr)
            return
        from rich.markup import escape

        rich_console.print(f"[dim]debug:[/dim] {escape(message)}")


console = _ConsoleProxy()
