"""mfcompiler - ICU MessageFormat template compiler.

Compiles parsed message templates (token trees, optionally keyed by locale)
into function source text, and records the runtime helpers, plural-rule
locales and formatters the emitted code depends on.

Public API:
    Compiler - Token compiler with side tables
    MessageFormatConfig - Configuration owner (bidi/intl flags, formatters)
    template_from_json - Build a Template from parser JSON output
    introspect_template - Read-only template analysis
    available_plural_locales - Locale keys with CLDR plural rules (via Babel)

Exceptions:
    MessageFormatError - Base exception class
    CompilationError - Template cannot be compiled
    MissingFallbackCaseError - select/plural without an 'other' case
    UnresolvedFormatterError - Unknown formatter key
    UnrecognizedTokenError - Token variant without a compile rule

Submodules:
    mfcompiler.syntax.ast - Token and template types
    mfcompiler.core.identifiers - propname, funcname, bidi_mark_text
    mfcompiler.diagnostics - Error types and diagnostic formatting
"""

from .compiler import CompiledTemplate, Compiler
from .config import MessageFormatConfig
from .diagnostics import (
    CompilationError,
    MalformedTokenError,
    MessageFormatError,
    MissingFallbackCaseError,
    UnrecognizedTokenError,
    UnresolvedFormatterError,
)
from .introspection import introspect_template
from .locale_utils import available_plural_locales
from .syntax import template_from_json

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("mfcompiler")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompilationError",
    "CompiledTemplate",
    "Compiler",
    "MalformedTokenError",
    "MessageFormatConfig",
    "MessageFormatError",
    "MissingFallbackCaseError",
    "UnrecognizedTokenError",
    "UnresolvedFormatterError",
    "__version__",
    "available_plural_locales",
    "introspect_template",
    "template_from_json",
]
