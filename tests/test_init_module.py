"""Tests for the strcmdlex package __init__.py module.

Covers:
- Top-level convenience functions delegate to the syntax package
- Fallback version when package metadata is unavailable
- __all__ integrity: every exported name is accessible
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import MagicMock, patch

import pytest

import strcmdlex
from strcmdlex.syntax import StringCompiler, StringParser


class TestConvenienceFunctions:
    """parse_string and compile_string are the public entry points."""

    def test_parse_string(self) -> None:
        parsed = strcmdlex.parse_string("{G=n}{ORANGE}Text")
        assert parsed == StringParser().parse("{G=n}{ORANGE}Text")

    def test_compile_string(self) -> None:
        parsed = strcmdlex.parse_string("{G = n}{P 1 a b}")
        assert strcmdlex.compile_string(parsed) == StringCompiler().compile(parsed)
        assert strcmdlex.compile_string(parsed) == "{G=n}{P 1 a b}"

    def test_compile_string_validate(self) -> None:
        parsed = strcmdlex.parse_string("{NUM}")
        assert strcmdlex.compile_string(parsed, validate=True) == "{NUM}"

    def test_syntax_error_exported(self) -> None:
        with pytest.raises(strcmdlex.StringSyntaxError):
            strcmdlex.parse_string("{1}")

    def test_base_error_catches_syntax_errors(self) -> None:
        with pytest.raises(strcmdlex.StringCommandError):
            strcmdlex.parse_string("{")


def test_version_fallback_when_package_not_installed() -> None:
    """PackageNotFoundError during metadata lookup sets __version__ to the dev fallback."""
    saved_modules = {
        name: module
        for name, module in sys.modules.items()
        if name == "strcmdlex" or name.startswith("strcmdlex.")
    }

    try:
        for module_name in list(saved_modules.keys()):
            del sys.modules[module_name]

        mock_version = MagicMock(side_effect=PackageNotFoundError("strcmdlex"))

        with patch("importlib.metadata.version", mock_version):
            import strcmdlex as fresh

            assert fresh.__version__ == "0.0.0+dev"
    finally:
        for module_name in [
            name for name in sys.modules if name == "strcmdlex" or name.startswith("strcmdlex.")
        ]:
            del sys.modules[module_name]

        sys.modules.update(saved_modules)


class TestInitModuleExports:
    """__all__ lists exactly the public names."""

    def test_all_names_accessible(self) -> None:
        for name in strcmdlex.__all__:
            assert hasattr(strcmdlex, name), f"{name} in __all__ but not accessible"

    def test_expected_exports(self) -> None:
        assert set(strcmdlex.__all__) == {
            "CompilationValidationError",
            "ParsedString",
            "StringCommandError",
            "StringSyntaxError",
            "__version__",
            "compile_string",
            "parse_string",
        }

    def test_version_is_string(self) -> None:
        assert isinstance(strcmdlex.__version__, str)
        assert strcmdlex.__version__

    @pytest.mark.parametrize("module", ["strcmdlex.syntax", "strcmdlex.diagnostics"])
    def test_subpackage_all_accessible(self, module: str) -> None:
        package = sys.modules[module]
        for name in package.__all__:
            assert hasattr(package, name), f"{module}.{name} missing"
