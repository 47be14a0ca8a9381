"""Custom exception hierarchy for mll-harness.

The harness pipeline itself never fails: malformed numbers degrade to
``0.0``.  Errors only originate at the configuration boundary (loading
the transformation) or inside the transformation while it runs.  Raw
``OSError`` / ``ImportError`` / ``IndexError`` instances are caught
where they occur and re-raised as one of the typed subclasses below.

Hierarchy
---------
MllHarnessError
├── TransformationLoadError
├── TransformationError
└── EnvironmentError
"""

from __future__ import annotations


class MllHarnessError(Exception):
    """Base exception for all mll-harness errors.

    The CLI error boundary renders these as a one-line message plus an
    optional hint, without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Transformation --------------------------------------------------------

class TransformationLoadError(MllHarnessError):
    """Raised when the configured transformation cannot be obtained."""


class TransformationError(MllHarnessError):
    """Raised when the transformation fails while it is being called."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MllHarnessError):
    """Raised when an optional runtime dependency is not available."""
