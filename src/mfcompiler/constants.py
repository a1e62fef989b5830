"""Shared constants for mfcompiler.

Centralized tables used by the compiler and its identifier utilities.
Placing them here avoids circular imports between the core and compiler
packages and keeps the versioned data in one place.

Constants are grouped by domain:
- Depth limits: Recursion protection for compilation and introspection
- Runtime helpers: Names the emitted code may call
- Reserved words: Identifier tables for the emitted target source
- Bidi data: Right-to-left locale table (versioned CLDR snapshot)

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Runtime helpers
    "RUNTIME_HELPERS",
    "HELPER_NUMBER",
    "HELPER_PLURAL",
    "HELPER_SELECT",
    # Emitted-source names
    "DATA_PARAM",
    "FORMATTERS_OBJECT",
    "FALLBACK_CASE",
    "OCTOTHORPE_TEXT",
    # Reserved words
    "RESERVED_PROPERTY_NAMES",
    "RESERVED_FUNCTION_NAMES",
    # Bidi data
    "RTL_DATA_VERSION",
    "RTL_LOCALE_PATTERNS",
    "LRM",
    "RLM",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of Select/Plural case bodies and Catalog branches.
# Parser output for real messages stays well below 10 levels; anything
# deeper than this is malformed or adversarial.
MAX_DEPTH: int = 100

# ============================================================================
# RUNTIME HELPERS
# ============================================================================

HELPER_SELECT: str = "select"
HELPER_PLURAL: str = "plural"
HELPER_NUMBER: str = "number"

RUNTIME_HELPERS: frozenset[str] = frozenset({HELPER_SELECT, HELPER_PLURAL, HELPER_NUMBER})

# ============================================================================
# EMITTED-SOURCE NAMES
# ============================================================================

# Parameter name of every compiled message function: function(d) { ... }
DATA_PARAM: str = "d"

# Receiver object holding formatter functions at link time: fmt.number(...)
FORMATTERS_OBJECT: str = "fmt"

# Mandatory case key of every select, plural and selectordinal token.
FALLBACK_CASE: str = "other"

# Target source emitted for an octothorpe outside any plural context.
OCTOTHORPE_TEXT: str = '"#"'

# ============================================================================
# RESERVED WORDS
# ============================================================================

# ECMAScript 3rd Edition keywords, future reserved words and literals.
# Property names in this set are quoted so that the emitted object literals
# and member reads stay valid on legacy runtimes (IE8 rejects `d.default`
# and `{ class: ... }`).
RESERVED_PROPERTY_NAMES: frozenset[str] = frozenset({
    # Keywords
    "break", "continue", "delete", "else", "for", "function", "if", "in",
    "new", "return", "this", "typeof", "var", "void", "while", "with",
    "case", "catch", "default", "do", "finally", "instanceof", "switch",
    "throw", "try",
    # Future reserved words
    "abstract", "boolean", "byte", "char", "class", "const", "debugger",
    "double", "enum", "export", "extends", "final", "float", "goto",
    "implements", "import", "int", "interface", "long", "native", "package",
    "private", "protected", "public", "short", "static", "super",
    "synchronized", "throws", "transient", "volatile",
    # Literals
    "null", "true", "false",
})

# ECMAScript 2015 reserved words in strict mode, including literals.
# Function names in this set get a leading underscore.
RESERVED_FUNCTION_NAMES: frozenset[str] = frozenset({
    # Keywords
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "export", "extends", "finally", "for",
    "function", "if", "import", "in", "instanceof", "new", "return", "super",
    "switch", "this", "throw", "try", "typeof", "var", "void", "while",
    "with", "yield",
    # Future reserved words
    "enum", "await",
    # Strict mode future reserved words
    "implements", "interface", "let", "package", "private", "protected",
    "public", "static",
    # Literals
    "null", "true", "false",
})

# ============================================================================
# BIDI DATA
# ============================================================================

# Source snapshot of the right-to-left table below. Regenerate with:
#   git clone https://github.com/unicode-cldr/cldr-misc-full.git
#   cd cldr-misc-full/main/
#   grep characterOrder -r . | tr '"/' '\t' | cut -f2,6 | grep -C4 right-to-left
RTL_DATA_VERSION: str = "CLDR 27-28"

# Locale-tag prefixes (regular expression fragments, anchored at the start of
# the tag) whose character order is right-to-left. "ks" excludes Bafia,
# Shambala and Colognian, which share the prefix.
RTL_LOCALE_PATTERNS: tuple[str, ...] = (
    "ar",
    "ckb",
    "fa",
    "he",
    "ks($|[^bfh])",
    "lrc",
    "mzn",
    "pa-Arab",
    "ps",
    "ug",
    "ur",
    "uz-Arab",
    "yi",
)

# Unicode directional marks.
RLM: str = "\u200f"  # RIGHT-TO-LEFT MARK
LRM: str = "\u200e"  # LEFT-TO-RIGHT MARK
