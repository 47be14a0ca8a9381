"""Fixed-point rendering of numeric vectors.

Shared by the input and output lines so both use exactly the same
notation: ``%f`` per element, ``", "`` between elements, wrapped in
parentheses.
"""

from __future__ import annotations

from collections.abc import Iterable

INPUT_PREFIX: str = "mll"
OUTPUT_PREFIX: str = "=> "


def format_vector(values: Iterable[float]) -> str:
    """Render *values* as ``(v0, v1, ...)``; an empty vector is ``()``."""
    return "(" + ", ".join("%f" % value for value in values) + ")"


def format_result_lines(
    inputs: Iterable[float],
    outputs: Iterable[float],
) -> tuple[str, str]:
    """Return the input and output lines, without trailing newlines."""
    return (
        INPUT_PREFIX + format_vector(inputs),
        OUTPUT_PREFIX + format_vector(outputs),
    )
