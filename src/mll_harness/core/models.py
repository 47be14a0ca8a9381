"""Domain models for mll-harness.

Both models are frozen dataclasses.  The mutable buffers that the
transformation writes into never leave
:class:`~mll_harness.core.dispatch_service.DispatchService`; what
escapes is an immutable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """The numeric arguments and mode flag of a single run."""

    inputs: tuple[float, ...]
    """Parsed numbers, in command-line order."""

    backwards: bool
    """``True`` when ``-b`` was given at least once."""

    @property
    def output_size(self) -> int:
        """Number of output slots: ``1``, or ``len(inputs) + 1`` with ``-b``."""
        if self.backwards:
            return len(self.inputs) + 1
        return 1


# ---------------------------------------------------------------------------
# Result of one transformation call
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Input and output vectors after the transformation returned."""

    inputs: tuple[float, ...]
    outputs: tuple[float, ...]
