"""CLI application entry point for mll-harness.

This module is the **sole error boundary** for the entire application.
It catches :class:`~mll_harness.exceptions.MllHarnessError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
message on stderr and returns a well-defined exit code.

Command line
------------
``mll-harness [-b] [<number> ...]``

``-b`` is the only switch.  Every other token, ``-h`` and ``--version``
included, is a number candidate that degrades to ``0.0`` when it does
not parse.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from mll_harness.cli import exit_codes
from mll_harness.cli.console import console
from mll_harness.core.dispatch_service import DispatchService
from mll_harness.core.formatting import format_result_lines
from mll_harness.core.models import DispatchResult
from mll_harness.core.parsing import parse_arguments
from mll_harness.exceptions import MllHarnessError
from mll_harness.infra.settings import load_settings
from mll_harness.infra.transformations import describe_transformation, resolve_transformation


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def write_result(result: DispatchResult, stream: TextIO | None = None) -> None:
    """Print the ``mll(...)`` and ``=> (...)`` lines to *stream* (stdout)."""
    out = sys.stdout if stream is None else stream
    input_line, output_line = format_result_lines(result.inputs, result.outputs)
    print(input_line, file=out)
    print(output_line, file=out)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the harness once.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    invocation = parse_arguments(args)

    settings = load_settings()
    if settings.debug:
        console.debug(f"transformation: {describe_transformation(settings)}")
        console.debug(
            f"inputs={len(invocation.inputs)} outputs={invocation.output_size} "
            f"backwards={invocation.backwards}"
        )

    service = DispatchService(resolve_transformation(settings))
    write_result(service.run(invocation))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except MllHarnessError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            f"{type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
