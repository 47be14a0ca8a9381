"""Shared pytest fixtures and configuration for the mll-harness test suite.

Guidelines
----------
* No compiler, no network.
* Core tests must be pure, with no side effects.
* Tests must not depend on the caller's ``MLL_*`` environment.
"""

from __future__ import annotations

import pytest

_MLL_VARIABLES = ("MLL_FUNCTION", "MLL_LIBRARY", "MLL_SYMBOL", "MLL_DEBUG")


@pytest.fixture(autouse=True)
def _clean_mll_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _MLL_VARIABLES:
        monkeypatch.delenv(name, raising=False)
