"""Core dispatch service: sizes the buffers and calls the transformation.

The :class:`~mll_harness.core.protocols.Transformation` is injected at
construction time.  This service is responsible for:

* Allocating the zeroed output buffer from the mode flag.
* Exposing both buffers as ``memoryview`` objects (input read-only).
* Ensuring only :class:`~mll_harness.exceptions.MllHarnessError`
  subclasses escape.

Guarantees
----------
* No I/O, no ``print()``.
* Buffers are heap-backed ``array("d")`` objects sized after parsing.
"""

from __future__ import annotations

from array import array

from mll_harness.core.models import DispatchResult, Invocation
from mll_harness.core.protocols import Transformation
from mll_harness.exceptions import MllHarnessError, TransformationError


class DispatchService:
    """Drives one parse-size-call cycle.

    Parameters
    ----------
    transformation:
        Any callable satisfying the :class:`Transformation` protocol.
    """

    def __init__(self, transformation: Transformation) -> None:
        self._transformation: Transformation = transformation

    # ------------------------------------------------------------------
    # Buffer allocation (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def allocate_outputs(invocation: Invocation) -> array:
        """Return a zero-filled ``array("d")`` of ``invocation.output_size``."""
        return array("d", bytes(invocation.output_size * array("d").itemsize))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, invocation: Invocation) -> DispatchResult:
        """Call the transformation once and snapshot both vectors.

        Raises
        ------
        TransformationError
            When the transformation raises, including out-of-range
            indexing of either buffer.
        """
        inputs = array("d", invocation.inputs)
        outputs = self.allocate_outputs(invocation)

        try:
            self._transformation(memoryview(inputs).toreadonly(), memoryview(outputs))
        except MllHarnessError:
            # Already typed; propagate unchanged.
            raise
        except IndexError as exc:
            raise TransformationError(
                f"Transformation accessed a buffer out of range: {exc}",
                hint=(
                    f"This run has {len(inputs)} input(s) and "
                    f"{len(outputs)} output(s)."
                ),
            ) from exc
        except Exception as exc:
            raise TransformationError(
                f"Transformation failed: {type(exc).__name__}: {exc}",
            ) from exc

        return DispatchResult(inputs=invocation.inputs, outputs=tuple(outputs))
