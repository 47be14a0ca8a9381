"""CLI layer: argument intake, standard output, and error boundary.

This package is the outermost layer.  It may import from ``core`` and
``infra``; nothing imports from ``cli``.
"""
