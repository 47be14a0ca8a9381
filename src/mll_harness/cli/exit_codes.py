"""Exit-code constants used by the CLI layer.

The harness itself always finishes with :data:`SUCCESS`; the other
codes cover configuration and transformation failures.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Vectors were printed."""

GENERAL_ERROR: int = 1
"""A known MllHarnessError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
