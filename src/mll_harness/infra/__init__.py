"""Infrastructure layer: environment settings and transformation loading.

This layer is the only place that reads ``os.environ``, imports user
modules by name, or touches ``ctypes``.  Raw ``OSError`` /
``ImportError`` / ``AttributeError`` instances are re-raised here as
:class:`~mll_harness.exceptions.TransformationLoadError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from mll_harness.infra.settings import HarnessSettings, load_settings
from mll_harness.infra.transformations import (
    SharedLibraryTransformation,
    describe_transformation,
    load_python_transformation,
    resolve_transformation,
    zero_transformation,
)

__all__: list[str] = [
    "HarnessSettings",
    "SharedLibraryTransformation",
    "describe_transformation",
    "load_python_transformation",
    "load_settings",
    "resolve_transformation",
    "zero_transformation",
]
