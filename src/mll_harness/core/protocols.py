"""Protocols (interfaces) consumed by the core layer.

The external ``mll`` routine is reached only through
:class:`Transformation`.  Concrete adapters live in
:mod:`mll_harness.infra.transformations`.
"""

from __future__ import annotations

from typing import Protocol


class Transformation(Protocol):
    """Contract for the external numeric transformation.

    Any callable with this signature satisfies the protocol
    structurally, plain functions included.
    """

    def __call__(self, inputs: memoryview, outputs: memoryview) -> None:
        """Read *inputs* and write results into *outputs* in place.

        Parameters
        ----------
        inputs:
            Read-only view of format ``"d"`` over the input vector.
        outputs:
            Writable, fixed-length view of format ``"d"``.  Every slot
            is ``0.0`` on entry; the transformation may write any
            number of them.
        """
        ...  # pragma: no cover
