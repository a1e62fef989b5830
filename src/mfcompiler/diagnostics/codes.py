"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for compilation failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Template contract errors (token tree handed over by the parser)
        2000-2999: Environment errors (formatters, locales)
        3000-3999: Resource limits
    """

    # Template contract errors (1000-1999)
    MISSING_FALLBACK_CASE = 1001
    UNRECOGNIZED_TOKEN = 1002
    MALFORMED_TOKEN = 1003

    # Environment errors (2000-2999)
    UNRESOLVED_FORMATTER = 2001

    # Resource limits (3000-3999)
    MAX_DEPTH_EXCEEDED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to point a
    template author at the offending token without re-running compilation.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        token_type: Token variant involved ("select", "plural", ...)
        argument_name: Argument key of the offending token
        formatter_key: Formatter key of a FunctionCall token
        locale: Locale in effect when the error occurred
        severity: Error severity level
        template_path: Catalog keys leading to the failing message
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    token_type: str | None = None
    argument_name: str | None = None
    formatter_key: str | None = None
    locale: str | None = None
    severity: Literal["error", "warning"] = "error"
    template_path: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_FALLBACK_CASE]: No 'other' case in plural on 'count'
              = token: plural
              = argument: count
              = help: Add an 'other' case; it is selected when no other key matches

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
