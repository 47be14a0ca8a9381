"""Adapters that turn configuration into a callable ``Transformation``.

Three sources are supported, tried in this order by
:func:`resolve_transformation`:

1. ``MLL_FUNCTION``: a Python callable named ``package.module:attr``.
2. ``MLL_LIBRARY``: a shared library exporting
   ``void mll(double *in, double *out)``, loaded with :mod:`ctypes`.
3. :func:`zero_transformation`, which leaves every output slot at ``0.0``.

This module is the **only** place in the codebase that imports
``ctypes`` or imports user code by name.
"""

from __future__ import annotations

import ctypes
import importlib
from typing import Any

from mll_harness.core.protocols import Transformation
from mll_harness.exceptions import TransformationLoadError
from mll_harness.infra.settings import DEFAULT_SYMBOL, HarnessSettings

_DOUBLE_POINTER = ctypes.POINTER(ctypes.c_double)


# ---------------------------------------------------------------------------
# Built-in fallback
# ---------------------------------------------------------------------------

def zero_transformation(inputs: memoryview, outputs: memoryview) -> None:
    """Write nothing; the pre-zeroed outputs are printed unchanged."""


# ---------------------------------------------------------------------------
# Native code via ctypes
# ---------------------------------------------------------------------------

class SharedLibraryTransformation:
    """Concrete :class:`Transformation` backed by a native ``mll`` symbol.

    Usage::

        mll = SharedLibraryTransformation("./libmll.so")
        mll(inputs_view, outputs_view)

    The input vector is copied into a fresh C array so the native code
    never sees the caller's read-only buffer.  The output C array shares
    memory with *outputs*, so native writes land in place.
    """

    def __init__(self, path: str, symbol: str = DEFAULT_SYMBOL) -> None:
        try:
            library = ctypes.CDLL(path)
        except OSError as exc:
            raise TransformationLoadError(
                f"Cannot load shared library {path!r}: {exc}",
                hint="Check MLL_LIBRARY points to a compiled library for this platform.",
            ) from exc

        try:
            function: Any = getattr(library, symbol)
        except AttributeError as exc:
            raise TransformationLoadError(
                f"Symbol {symbol!r} not found in {path!r}.",
                hint="Set MLL_SYMBOL to the exported function name.",
            ) from exc

        function.argtypes = (_DOUBLE_POINTER, _DOUBLE_POINTER)
        function.restype = None

        self.path: str = path
        self.symbol: str = symbol
        self._function: Any = function

    def __call__(self, inputs: memoryview, outputs: memoryview) -> None:
        in_buffer = (ctypes.c_double * len(inputs)).from_buffer_copy(inputs)
        out_buffer = (ctypes.c_double * len(outputs)).from_buffer(outputs)
        self._function(in_buffer, out_buffer)


# ---------------------------------------------------------------------------
# Python callables
# ---------------------------------------------------------------------------

def load_python_transformation(reference: str) -> Transformation:
    """Import the callable named by *reference* (``module:attr.path``).

    Raises
    ------
    TransformationLoadError
        When the reference is malformed, the module cannot be imported,
        an attribute is missing, or the target is not callable.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise TransformationLoadError(
            f"Invalid transformation reference {reference!r}.",
            hint="Use the form package.module:function.",
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TransformationLoadError(
            f"Cannot import module {module_name!r}: {exc}",
        ) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise TransformationLoadError(
                f"{reference!r} has no attribute {part!r}.",
            ) from exc

    if not callable(target):
        raise TransformationLoadError(
            f"{reference!r} is not callable.",
            hint="The transformation must accept (inputs, outputs).",
        )
    return target


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def resolve_transformation(settings: HarnessSettings) -> Transformation:
    """Return the transformation selected by *settings*."""
    if settings.function_ref is not None:
        return load_python_transformation(settings.function_ref)
    if settings.library_path is not None:
        return SharedLibraryTransformation(settings.library_path, settings.symbol)
    return zero_transformation


def describe_transformation(settings: HarnessSettings) -> str:
    """Human-readable name of the source :func:`resolve_transformation` uses."""
    if settings.function_ref is not None:
        return f"python {settings.function_ref}"
    if settings.library_path is not None:
        return f"library {settings.library_path} ({settings.symbol})"
    return "built-in zero transformation"
