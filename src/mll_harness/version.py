"""Single source of truth for the mll-harness version string."""

__version__ = "0.1.0"
