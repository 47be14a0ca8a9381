"""Core / service layer: parsing, sizing, formatting and dispatch.

Rules
-----
* No ``print()`` calls.
* No filesystem, environment or native-library access.
* No imports from ``cli`` or ``infra``.
"""

from mll_harness.core.dispatch_service import DispatchService
from mll_harness.core.formatting import format_result_lines, format_vector
from mll_harness.core.models import DispatchResult, Invocation
from mll_harness.core.parsing import parse_arguments, parse_number
from mll_harness.core.protocols import Transformation

__all__: list[str] = [
    "DispatchResult",
    "DispatchService",
    "Invocation",
    "Transformation",
    "format_result_lines",
    "format_vector",
    "parse_arguments",
    "parse_number",
]
