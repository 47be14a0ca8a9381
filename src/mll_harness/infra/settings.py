"""Environment settings for mll-harness.

- MLL_FUNCTION: Python transformation as ``package.module:attribute``
- MLL_LIBRARY: path to a shared library exporting the transformation
- MLL_SYMBOL: exported symbol to look up in MLL_LIBRARY (default: mll)
- MLL_DEBUG: 1 | true | yes | on enables stderr diagnostics

Empty or whitespace-only values count as unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_SYMBOL: str = "mll"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class HarnessSettings:
    """Resolved start-up configuration."""

    function_ref: str | None = None
    library_path: str | None = None
    symbol: str = DEFAULT_SYMBOL
    debug: bool = False


def _get(environ: Mapping[str, str], name: str) -> str | None:
    value = (environ.get(name) or "").strip()
    return value or None


def load_settings(environ: Mapping[str, str] | None = None) -> HarnessSettings:
    """Read :class:`HarnessSettings` from *environ* (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    debug = (_get(env, "MLL_DEBUG") or "").lower() in _TRUTHY
    return HarnessSettings(
        function_ref=_get(env, "MLL_FUNCTION"),
        library_path=_get(env, "MLL_LIBRARY"),
        symbol=_get(env, "MLL_SYMBOL") or DEFAULT_SYMBOL,
        debug=debug,
    )
