"""Tests for diagnostics: codes, templates, formatter and exception hierarchy."""

from __future__ import annotations

import json

import pytest

from mfcompiler.core.depth_guard import DepthLimitExceededError
from mfcompiler.diagnostics import (
    CompilationError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    MalformedTokenError,
    MessageFormatError,
    MissingFallbackCaseError,
    OutputFormat,
    UnrecognizedTokenError,
    UnresolvedFormatterError,
)


class TestDiagnosticCode:
    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.MISSING_FALLBACK_CASE, 1000, 1999),
            (DiagnosticCode.UNRECOGNIZED_TOKEN, 1000, 1999),
            (DiagnosticCode.MALFORMED_TOKEN, 1000, 1999),
            (DiagnosticCode.UNRESOLVED_FORMATTER, 2000, 2999),
            (DiagnosticCode.MAX_DEPTH_EXCEEDED, 3000, 3999),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestErrorTemplate:
    def test_missing_fallback_case(self) -> None:
        diagnostic = ErrorTemplate.missing_fallback_case("select", "gender", ("male", "female"))
        assert diagnostic.code is DiagnosticCode.MISSING_FALLBACK_CASE
        assert diagnostic.message == (
            "No 'other' case in select on 'gender' (cases: 'male', 'female')"
        )
        assert diagnostic.token_type == "select"
        assert diagnostic.argument_name == "gender"
        assert diagnostic.help_url is not None

    def test_missing_fallback_case_without_cases(self) -> None:
        diagnostic = ErrorTemplate.missing_fallback_case("plural", "n", ())
        assert diagnostic.message.endswith("(cases: none)")

    def test_unresolved_formatter(self) -> None:
        diagnostic = ErrorTemplate.unresolved_formatter("frobnicate", "fr")
        assert diagnostic.code is DiagnosticCode.UNRESOLVED_FORMATTER
        assert diagnostic.message == "Formatting function 'frobnicate' not found"
        assert diagnostic.formatter_key == "frobnicate"
        assert diagnostic.locale == "fr"

    def test_unrecognized_token(self) -> None:
        diagnostic = ErrorTemplate.unrecognized_token({"type": "bogus"})
        assert diagnostic.message == "Parser error for token {'type': 'bogus'}"
        assert diagnostic.token_type == "dict"

    def test_malformed_token(self) -> None:
        diagnostic = ErrorTemplate.malformed_token({"type": "argument"}, "missing field 'arg'")
        assert diagnostic.code is DiagnosticCode.MALFORMED_TOKEN
        assert "missing field 'arg'" in diagnostic.message

    def test_expression_depth_exceeded(self) -> None:
        diagnostic = ErrorTemplate.expression_depth_exceeded(7)
        assert diagnostic.code is DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert "(7)" in diagnostic.message


class TestDiagnosticFormatter:
    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unresolved_formatter("frobnicate", "en")

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[0] == "error[UNRESOLVED_FORMATTER]: Formatting function 'frobnicate' not found"
        assert "  = token: function" in lines
        assert "  = formatter: frobnicate" in lines
        assert "  = locale: en" in lines
        assert any(line.startswith("  = help: ") for line in lines)

    def test_rust_format_template_path(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.MISSING_FALLBACK_CASE,
            message="boom",
            template_path=("greetings", "en", "welcome"),
        )
        output = DiagnosticFormatter().format(diagnostic)
        assert "  --> greetings.en.welcome" in output.splitlines()

    def test_rust_format_warning_with_color(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.MALFORMED_TOKEN, message="odd", severity="warning"
        )
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;33mwarning\033[0m[MALFORMED_TOKEN]")

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert output == "UNRESOLVED_FORMATTER: Formatting function 'frobnicate' not found"

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data["code"] == "UNRESOLVED_FORMATTER"
        assert data["code_value"] == 2001
        assert data["severity"] == "error"
        assert data["formatter_key"] == "frobnicate"
        assert data["locale"] == "en"
        assert "argument_name" not in data

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.MALFORMED_TOKEN, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "MALFORMED_TOKEN: xxxxxxxxxx..."

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1

    def test_str_is_message(self, diagnostic: Diagnostic) -> None:
        assert str(diagnostic) == diagnostic.message


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            MissingFallbackCaseError,
            UnresolvedFormatterError,
            UnrecognizedTokenError,
            MalformedTokenError,
            DepthLimitExceededError,
        ],
    )
    def test_all_are_compilation_errors(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, CompilationError)
        assert issubclass(error_type, MessageFormatError)

    def test_plain_message(self) -> None:
        error = CompilationError("bad template")
        assert str(error) == "bad template"
        assert error.diagnostic is None

    def test_diagnostic_message_is_rendered(self) -> None:
        diagnostic = ErrorTemplate.missing_fallback_case("plural", "count", ("one",))
        error = MissingFallbackCaseError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith(
            "error[MISSING_FALLBACK_CASE]: No 'other' case in plural on 'count'"
        )

    def test_prepend_template_key_builds_path_from_root(self) -> None:
        error = MissingFallbackCaseError(ErrorTemplate.missing_fallback_case("select", "g", ()))
        error.prepend_template_key("welcome")
        error.prepend_template_key("en")
        assert error.diagnostic is not None
        assert error.diagnostic.template_path == ("en", "welcome")
        assert "  --> en.welcome" in str(error).splitlines()

    def test_prepend_template_key_without_diagnostic(self) -> None:
        error = CompilationError("bad template")
        error.prepend_template_key("en")
        assert error.diagnostic is None
        assert str(error) == "bad template"
