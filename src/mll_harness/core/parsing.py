"""Pure command-line parsing: argument tokens to an :class:`Invocation`.

Every function here is deterministic and never raises for bad input.
Numbers are read with ``strtod`` prefix semantics:

1. **Skip** leading ASCII whitespace.
2. **Match** the longest numeric prefix (decimal, hex float, inf, nan).
3. **Convert** the prefix; anything after it is ignored.

A token with no numeric prefix at all is ``0.0``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from mll_harness.core.models import Invocation

BACKWARDS_FLAG: str = "-b"
"""The only recognised switch; every other token is a number candidate."""

_NUMBER_PREFIX = re.compile(
    r"""
    \s*
    (?P<number>
        [+-]?
        (?:
            (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
          | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?
          | inf(?:inity)?
          | nan
        )
    )
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


# ---------------------------------------------------------------------------
# Single token
# ---------------------------------------------------------------------------

def parse_number(token: str) -> float:
    """Convert *token* to ``float`` the way C ``atof`` does.

    ``"2.5"`` -> ``2.5``, ``"3abc"`` -> ``3.0``, ``"abc"`` -> ``0.0``,
    ``"0x1p4"`` -> ``16.0``, ``"1e999"`` -> ``inf``.
    """
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        return 0.0

    text = match.group("number")
    if match.group("hex") is None:
        return float(text)

    try:
        return float.fromhex(text)
    except OverflowError:
        return -math.inf if text.startswith("-") else math.inf


# ---------------------------------------------------------------------------
# Whole argument list
# ---------------------------------------------------------------------------

def parse_arguments(argv: Iterable[str]) -> Invocation:
    """Split *argv* into numeric inputs and the ``-b`` mode flag.

    Only a token exactly equal to ``-b`` counts as the flag; repeating
    it has no further effect and its position does not matter.  All
    other tokens are parsed with :func:`parse_number` and kept in their
    original relative order.
    """
    inputs: list[float] = []
    backwards = False
    for token in argv:
        if token == BACKWARDS_FLAG:
            backwards = True
        else:
            inputs.append(parse_number(token))
    return Invocation(inputs=tuple(inputs), backwards=backwards)
