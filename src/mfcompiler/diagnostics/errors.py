"""Compiler exception hierarchy with structured diagnostics.

Every exception can carry a Diagnostic object for rich error information.
All compilation errors are fatal: the top-level compile call aborts and no
partial output is produced.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import replace

from .codes import Diagnostic

__all__ = [
    "CompilationError",
    "MalformedTokenError",
    "MessageFormatError",
    "MissingFallbackCaseError",
    "UnrecognizedTokenError",
    "UnresolvedFormatterError",
]


class MessageFormatError(Exception):
    """Base exception for all mfcompiler errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    def prepend_template_key(self, key: str) -> None:
        """Record one more catalog key on the path to the failing message.

        Called while the error unwinds through nested catalogs, innermost key
        first, so the finished path reads from the catalog root down.
        Errors without a diagnostic are left unchanged.
        """
        if self.diagnostic is None:
            return
        path = (key, *(self.diagnostic.template_path or ()))
        self.diagnostic = replace(self.diagnostic, template_path=path)
        self.args = (self.diagnostic.format_error(),)


class CompilationError(MessageFormatError):
    """A template or catalog entry cannot be compiled.

    Signals an authoring or integration bug, never a transient condition.
    Callers surface it to whoever authored the template.
    """


class MissingFallbackCaseError(CompilationError):
    """Select, plural or selectordinal token lacks an 'other' case.

    Example:
        {gender, select, male {he} female {she}}  ← no 'other'
    """


class UnresolvedFormatterError(CompilationError):
    """FunctionCall names a formatter absent from registry and default factories.

    Example:
        {when, frobnicate}  ← no 'frobnicate' formatter
    """


class UnrecognizedTokenError(CompilationError):
    """Token variant the compiler has no rule for.

    Indicates a parser/compiler contract mismatch rather than an authoring error.
    """


class MalformedTokenError(CompilationError):
    """Token data of a known variant with missing or invalid fields."""
