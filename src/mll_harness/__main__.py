"""Allow ``python -m mll_harness`` invocation.

Delegates to the same error-boundary entry point as the ``mll-harness``
console script.
"""

from __future__ import annotations

from mll_harness.cli.app import cli

if __name__ == "__main__":
    cli()
