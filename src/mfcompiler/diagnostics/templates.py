"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent across the compiler.
    """

    # ICU MessageFormat user guide
    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    @staticmethod
    def missing_fallback_case(token_type: str, arg: str, keys: tuple[str, ...]) -> Diagnostic:
        """Select, plural or selectordinal token without an 'other' case.

        Args:
            token_type: Token variant ("select", "plural", "selectordinal")
            arg: Argument key the token switches on
            keys: Case keys that are present

        Returns:
            Diagnostic for MISSING_FALLBACK_CASE
        """
        present = ", ".join(repr(k) for k in keys) or "none"
        msg = f"No 'other' case in {token_type} on '{arg}' (cases: {present})"
        return Diagnostic(
            code=DiagnosticCode.MISSING_FALLBACK_CASE,
            message=msg,
            hint="Add an 'other' case; it is selected when no other key matches",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
            token_type=token_type,
            argument_name=arg,
        )

    @staticmethod
    def unresolved_formatter(key: str, locale: str | None) -> Diagnostic:
        """Formatter key absent from the registry and the default factories.

        Args:
            key: Formatter key named by the FunctionCall token
            locale: Locale in effect

        Returns:
            Diagnostic for UNRESOLVED_FORMATTER
        """
        msg = f"Formatting function '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVED_FORMATTER,
            message=msg,
            hint="Register the formatter on the config, or enable intl_support for defaults",
            token_type="function",
            formatter_key=key,
            locale=locale,
        )

    @staticmethod
    def unrecognized_token(token: object) -> Diagnostic:
        """Token the compiler has no rule for.

        Args:
            token: The offending token (repr is embedded in the message)

        Returns:
            Diagnostic for UNRECOGNIZED_TOKEN
        """
        msg = f"Parser error for token {token!r}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_TOKEN,
            message=msg,
            hint="The parser and compiler disagree on the token set; check their versions",
            token_type=type(token).__name__,
        )

    @staticmethod
    def malformed_token(token: object, detail: str) -> Diagnostic:
        """Token data with a known type but missing or invalid fields.

        Args:
            token: Raw token data as received
            detail: What is wrong with it

        Returns:
            Diagnostic for MALFORMED_TOKEN
        """
        msg = f"Malformed token {token!r}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_TOKEN,
            message=msg,
            hint="Tokens must follow the parser's JSON output format",
        )

    @staticmethod
    def expression_depth_exceeded(max_depth: int) -> Diagnostic:
        """Token tree nested deeper than the configured limit.

        Args:
            max_depth: The limit that was hit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested select/plural cases or catalog branches",
        )
