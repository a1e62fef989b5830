"""Diagnostic system for compilation errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CompilationError,
    MalformedTokenError,
    MessageFormatError,
    MissingFallbackCaseError,
    UnrecognizedTokenError,
    UnresolvedFormatterError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CompilationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MalformedTokenError",
    "MessageFormatError",
    "MissingFallbackCaseError",
    "OutputFormat",
    "UnrecognizedTokenError",
    "UnresolvedFormatterError",
]
