"""Token tree definitions for parsed message templates.

The upstream parser turns ICU MessageFormat source such as

    {count, plural, offset:1 =0 {nobody} one {# other} other {# others}}

into the token variants below. A Template is either a single Message (a
token sequence) or a Catalog mapping keys to nested Templates.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tokens
    "Text",
    "Argument",
    "Select",
    "Plural",
    "SelectOrdinal",
    "FunctionCall",
    "Octothorpe",
    "Case",
    # Templates
    "Message",
    "Catalog",
    # Type aliases
    "Token",
    "PluralToken",
    "Template",
]

# ============================================================================
# TOKENS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text fragment.

    Example:
        "Hello " in "Hello {name}"
    """

    value: str


@dataclass(frozen=True, slots=True)
class Argument:
    """Interpolation of a named input value.

    Example:
        {name}
    """

    arg: str


@dataclass(frozen=True, slots=True)
class Case:
    """One branch of a select, plural or selectordinal token.

    Attributes:
        key: Case key ("male", "one", "=0", "other", ...)
        tokens: Body of the case
    """

    key: str
    tokens: tuple["Token", ...] = ()


@dataclass(frozen=True, slots=True)
class Select:
    """Choice between cases by exact argument value.

    Example:
        {gender, select, male {he} female {she} other {they}}
    """

    arg: str
    cases: tuple[Case, ...]


@dataclass(frozen=True, slots=True)
class Plural:
    """Choice between cases by cardinal plural category.

    Example:
        {count, plural, offset:1 one {# guest} other {# guests}}
    """

    arg: str
    cases: tuple[Case, ...]
    offset: int | float = 0


@dataclass(frozen=True, slots=True)
class SelectOrdinal:
    """Choice between cases by ordinal plural category.

    Offset is not part of the ordinal grammar and is always zero.

    Example:
        {place, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}
    """

    arg: str
    cases: tuple[Case, ...]

    @property
    def offset(self) -> int:
        """Ordinals never shift their argument."""
        return 0


@dataclass(frozen=True, slots=True)
class FunctionCall:
    """Call of an external formatting function.

    Example:
        {price, number, currency}  ->  FunctionCall("number", "price", ("currency",))
    """

    key: str
    arg: str
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Octothorpe:
    """The ``#`` placeholder inside a plural or selectordinal case body."""


# ============================================================================
# TEMPLATES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Message:
    """Leaf template: a single token sequence."""

    tokens: tuple["Token", ...] = ()


@dataclass(frozen=True, slots=True)
class Catalog:
    """Branch template: keys mapped to nested templates.

    Keys are locale tags ("en", "fr") or any other grouping key
    ("errors", "buttons"). Iteration order is insertion order.
    """

    entries: Mapping[str, "Template"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze entries so a Catalog is as immutable as its tokens."""
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Token = Text | Argument | Select | Plural | SelectOrdinal | FunctionCall | Octothorpe
type PluralToken = Plural | SelectOrdinal
type Template = Message | Catalog
