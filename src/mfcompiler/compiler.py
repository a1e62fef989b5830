"""Token compiler: message templates to target function source.

Compiles a Template (a Message token sequence, or a Catalog of nested
templates keyed by locale or any other key) into function source text:

    Message((Text("Hello "), Argument("name")))
        -> 'function(d) { return "Hello " + d.name; }'

The emitted code calls runtime helpers (``select``, ``plural``,
``number``), locale plural-rule functions (``en``, ``pt_BR``, ...) and
formatters (``fmt.number``). The compiler does not supply them; it records
which ones were referenced so the caller can link a self-contained bundle:

    compiler = Compiler(MessageFormatConfig())
    sources = compiler.compile(catalog, "en", available_plural_locales(catalog.entries))
    compiler.referenced_runtime_helpers   # {"plural", "number"}
    compiler.referenced_locales           # {"en", "fr"}
    compiler.referenced_formatters        # {"number"}

State:
    The side tables only grow across calls. Reusing an instance for the
    next catalog build is the caller's decision; call reset() in between.

Thread Safety:
    Not thread-safe. Use one Compiler (and one MessageFormatConfig) per
    concurrent compilation.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from mfcompiler.config import MessageFormatConfig
from mfcompiler.constants import (
    DATA_PARAM,
    FALLBACK_CASE,
    FORMATTERS_OBJECT,
    HELPER_NUMBER,
    HELPER_PLURAL,
    HELPER_SELECT,
    MAX_DEPTH,
    OCTOTHORPE_TEXT,
)
from mfcompiler.core.depth_guard import DepthGuard
from mfcompiler.core.identifiers import bidi_mark_text, funcname, js_literal, propname
from mfcompiler.diagnostics import (
    CompilationError,
    ErrorTemplate,
    MissingFallbackCaseError,
    UnrecognizedTokenError,
    UnresolvedFormatterError,
)
from mfcompiler.syntax.ast import (
    Argument,
    Catalog,
    FunctionCall,
    Message,
    Octothorpe,
    Plural,
    PluralToken,
    Select,
    SelectOrdinal,
    Template,
    Text,
    Token,
)

__all__ = ["CompiledTemplate", "Compiler"]

logger = logging.getLogger(__name__)

type CompiledTemplate = str | dict[str, CompiledTemplate]


class Compiler:
    """Compiles token trees into function source, tracking what they need.

    Attributes:
        config: Owning configuration (bidi flag, formatter registry)
        current_locale: Locale whose plural rules govern the subtree being
            compiled; None before the first compile() call
        referenced_runtime_helpers: Runtime helper names used by emitted code
        referenced_locales: Locales whose plural-rule function must be linked
        referenced_formatters: Formatter keys invoked by emitted code
    """

    __slots__ = (
        "_depth_guard",
        "config",
        "current_locale",
        "referenced_formatters",
        "referenced_locales",
        "referenced_runtime_helpers",
    )

    def __init__(
        self, config: MessageFormatConfig | None = None, *, max_depth: int = MAX_DEPTH
    ) -> None:
        """Initialize compiler bound to a configuration owner.

        Args:
            config: Configuration owner (default: a fresh MessageFormatConfig)
            max_depth: Maximum nesting of catalog branches and case bodies
        """
        self.config = config if config is not None else MessageFormatConfig()
        self.current_locale: str | None = None
        self.referenced_runtime_helpers: set[str] = set()
        self.referenced_locales: set[str] = set()
        self.referenced_formatters: set[str] = set()
        self._depth_guard = DepthGuard(max_depth=max_depth)

    def reset(self) -> None:
        """Clear compilation state before the next catalog build."""
        self.current_locale = None
        self.referenced_runtime_helpers.clear()
        self.referenced_locales.clear()
        self.referenced_formatters.clear()
        self._depth_guard.reset()

    def compile(
        self,
        template: Template,
        default_locale: str,
        plural_locales: Collection[str],
    ) -> CompiledTemplate:
        """Recursively compile a message or a tree of messages to function sources.

        Args:
            template: Message (token sequence) or Catalog (key -> template)
            default_locale: Locale for messages not below a locale key
            plural_locales: Keys that denote locales with a plural-rule
                function; a catalog key found here becomes the locale of its
                whole branch

        Returns:
            Function source for a Message; for a Catalog, a dict with the same
            keys (same order) holding the compiled branches

        Raises:
            MissingFallbackCaseError: Select/plural without an 'other' case
            UnresolvedFormatterError: Unknown formatter key
            UnrecognizedTokenError: Token variant without a compile rule
            DepthLimitExceededError: Nesting deeper than max_depth
        """
        return self._compile_template(template, default_locale, plural_locales)

    def _compile_template(
        self,
        template: Template,
        locale: str,
        plural_locales: Collection[str],
    ) -> CompiledTemplate:
        match template:
            case Message(tokens=tokens):
                self.current_locale = locale
                body = self._join(tokens, None)
                logger.debug("Compiled message for locale %s (%d tokens)", locale, len(tokens))
                return f"function({DATA_PARAM}) {{ return {body}; }}"
            case Catalog(entries=entries):
                result: dict[str, CompiledTemplate] = {}
                with self._depth_guard:
                    for key, branch in entries.items():
                        branch_locale = key if key in plural_locales else locale
                        try:
                            result[key] = self._compile_template(
                                branch, branch_locale, plural_locales
                            )
                        except CompilationError as e:
                            e.prepend_template_key(key)
                            raise
                return result
            case _:
                raise UnrecognizedTokenError(ErrorTemplate.unrecognized_token(template))

    def compile_token(self, token: Token, plural: PluralToken | None = None) -> str:
        """Compile one token to an expression.

        Args:
            token: Token to compile
            plural: Nearest enclosing Plural/SelectOrdinal token, if any; it
                gives octothorpes their argument and offset

        Returns:
            Target-source expression

        Raises:
            UnrecognizedTokenError: Token variant without a compile rule
        """
        match token:
            case Text(value=value):
                return js_literal(value)

            case Argument(arg=arg):
                read = propname(arg, DATA_PARAM)
                if self.config.bidi_support:
                    return bidi_mark_text(read, self.current_locale)
                return read

            case Select(arg=arg):
                cases = self.compile_cases(token, plural)
                self.referenced_runtime_helpers.add(HELPER_SELECT)
                return self._call(HELPER_SELECT, propname(arg, DATA_PARAM), cases)

            case SelectOrdinal(arg=arg):
                cases = self.compile_cases(token, token)
                pluralfn = self._reference_plural_rules()
                # Trailing 1 selects ordinal rather than cardinal rules
                return self._call(
                    HELPER_PLURAL, propname(arg, DATA_PARAM), "0", pluralfn, cases, "1"
                )

            case Plural(arg=arg, offset=offset):
                cases = self.compile_cases(token, token)
                pluralfn = self._reference_plural_rules()
                return self._call(
                    HELPER_PLURAL,
                    propname(arg, DATA_PARAM),
                    _offset_literal(offset),
                    pluralfn,
                    cases,
                )

            case FunctionCall(key=key, arg=arg, params=params):
                return self._compile_function_call(key, arg, params)

            case Octothorpe():
                if plural is None:
                    return OCTOTHORPE_TEXT
                self.referenced_runtime_helpers.add(HELPER_NUMBER)
                args = [propname(plural.arg, DATA_PARAM)]
                if plural.offset:
                    args.append(_offset_literal(plural.offset))
                return self._call(HELPER_NUMBER, *args)

            case _:
                raise UnrecognizedTokenError(ErrorTemplate.unrecognized_token(token))

    def compile_cases(
        self, token: Select | Plural | SelectOrdinal, plural: PluralToken | None = None
    ) -> str:
        """Build the case-object literal of a select/plural/selectordinal token.

        Args:
            token: Token whose cases are compiled
            plural: Enclosing plural context for the case bodies

        Returns:
            Object literal source, e.g. ``{ male: "he", other: "they" }``

        Raises:
            MissingFallbackCaseError: No case keyed 'other'
        """
        keys = tuple(case.key for case in token.cases)
        if FALLBACK_CASE not in keys:
            raise MissingFallbackCaseError(
                ErrorTemplate.missing_fallback_case(_token_type(token), token.arg, keys)
            )

        with self._depth_guard:
            entries = [
                f"{propname(case.key)}: {self._join(case.tokens, plural)}" for case in token.cases
            ]
        return "{ " + ", ".join(entries) + " }"

    def _compile_function_call(self, key: str, arg: str, params: Sequence[str]) -> str:
        if self.config.resolve_formatter(key) is None:
            raise UnresolvedFormatterError(
                ErrorTemplate.unresolved_formatter(key, self.current_locale)
            )

        args = [propname(arg, DATA_PARAM), js_literal(self._locale())]
        match len(params):
            case 0:
                pass
            case 1:
                args.append(js_literal(params[0]))
            case _:
                args.append(js_literal(list(params)))

        self.referenced_formatters.add(key)
        return self._call(propname(key, FORMATTERS_OBJECT), *args)

    def _join(self, tokens: Sequence[Token], plural: PluralToken | None) -> str:
        parts = [self.compile_token(token, plural) for token in tokens]
        return " + ".join(parts) or '""'

    def _reference_plural_rules(self) -> str:
        """Record the plural helper and current locale; return the rule function name."""
        locale = self._locale()
        self.referenced_locales.add(locale)
        self.referenced_runtime_helpers.add(HELPER_PLURAL)
        return funcname(locale)

    def _locale(self) -> str:
        # compile_token() may be driven directly, outside compile()
        if self.current_locale is None:
            msg = "No locale in effect; call compile() or set current_locale first"
            raise RuntimeError(msg)
        return self.current_locale

    @staticmethod
    def _call(fn: str, *args: str) -> str:
        return f"{fn}({', '.join(args)})"


def _token_type(token: Select | Plural | SelectOrdinal) -> str:
    match token:
        case Select():
            return "select"
        case SelectOrdinal():
            return "selectordinal"
        case _:
            return "plural"


def _offset_literal(offset: int | float) -> str:
    # Whole-number floats print like the target runtime prints numbers: 2, not 2.0
    if isinstance(offset, float) and offset.is_integer():
        offset = int(offset)
    return js_literal(offset or 0)
