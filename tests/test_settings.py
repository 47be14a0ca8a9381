"""Tests for environment settings (infra/settings.py)."""

from __future__ import annotations

import pytest

from mll_harness.infra.settings import DEFAULT_SYMBOL, HarnessSettings, load_settings


class TestLoadSettings:
    def test_defaults_from_empty_mapping(self) -> None:
        settings = load_settings({})
        assert settings == HarnessSettings()
        assert settings.function_ref is None
        assert settings.library_path is None
        assert settings.symbol == DEFAULT_SYMBOL == "mll"
        assert settings.debug is False

    def test_reads_all_variables(self) -> None:
        settings = load_settings(
            {
                "MLL_FUNCTION": "pkg.mod:fn",
                "MLL_LIBRARY": "./libmll.so",
                "MLL_SYMBOL": "mll_grad",
                "MLL_DEBUG": "1",
            }
        )
        assert settings.function_ref == "pkg.mod:fn"
        assert settings.library_path == "./libmll.so"
        assert settings.symbol == "mll_grad"
        assert settings.debug is True

    def test_values_are_stripped(self) -> None:
        settings = load_settings({"MLL_LIBRARY": "  ./libmll.so\n"})
        assert settings.library_path == "./libmll.so"

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_blank_counts_as_unset(self, blank: str) -> None:
        settings = load_settings(
            {"MLL_FUNCTION": blank, "MLL_LIBRARY": blank, "MLL_SYMBOL": blank}
        )
        assert settings.function_ref is None
        assert settings.library_path is None
        assert settings.symbol == DEFAULT_SYMBOL

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "On"])
    def test_debug_truthy(self, value: str) -> None:
        assert load_settings({"MLL_DEBUG": value}).debug is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "", "2"])
    def test_debug_falsy(self, value: str) -> None:
        assert load_settings({"MLL_DEBUG": value}).debug is False

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MLL_SYMBOL", "other")
        assert load_settings().symbol == "other"

    def test_frozen(self) -> None:
        settings = HarnessSettings()
        with pytest.raises(AttributeError):
            settings.debug = True  # type: ignore[misc]
