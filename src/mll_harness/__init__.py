"""mll-harness: command-line driver for an external ``mll`` transformation.

Parses numbers from the command line, hands them to the transformation
and prints both vectors.
"""

from mll_harness.version import __version__

__all__: list[str] = ["__version__"]
