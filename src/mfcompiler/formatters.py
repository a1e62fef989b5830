"""Formatter registry and Babel-backed default formatters.

A FunctionCall token such as ``{price, number, currency}`` compiles to
``fmt.number(d.price, "en", "currency")``. The compiler only needs to know
that a formatter named ``number`` exists; the callable itself is linked in
by the runtime bundle.

Formatters share one calling convention:

    formatter(value, locale_code, param=None) -> str

``param`` is the single literal parameter of the call, or a list when the
call has several.

Default formatters (number, date, time) are produced lazily by factories
that receive the owning MessageFormatConfig, so they can read settings such
as the default currency. A default-table entry may also be a ready-made
formatter; instantiate_default() tells the two apart.

Python 3.13+. Uses Babel for CLDR formatting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import UTC, date, datetime, time
from inspect import signature
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from babel import dates as babel_dates
from babel import numbers as babel_numbers

from mfcompiler.locale_utils import normalize_locale

if TYPE_CHECKING:
    from mfcompiler.config import MessageFormatConfig

__all__ = [
    "DEFAULT_FORMATTER_FACTORIES",
    "DefaultFormatter",
    "Formatter",
    "FormatterFactory",
    "FormatterRegistry",
    "date_formatter",
    "instantiate_default",
    "number_formatter",
    "time_formatter",
]

logger = logging.getLogger(__name__)

type FormatterParam = str | list[str] | None


class Formatter(Protocol):
    """Protocol for formatting functions callable from compiled messages."""

    def __call__(self, value: Any, locale_code: str, param: FormatterParam = None, /) -> str:
        ...  # pragma: no cover  # Protocol stub - not executable


type FormatterFactory = Callable[["MessageFormatConfig"], Formatter]

# Entry of a default-formatter table: a factory or the formatter itself
type DefaultFormatter = Formatter | FormatterFactory


class FormatterRegistry:
    """Mapping of formatter keys to formatting functions.

    Supports dict-like introspection:
        - resolve(key): Callable or None
        - __iter__: Iterate over keys
        - __len__: Count registered formatters
        - __contains__: Check if a key exists (supports 'in' operator)

    Example:
        >>> registry = FormatterRegistry()
        >>> registry.register(lambda v, lc, p=None: str(v).upper(), name="upcase")
        >>> "upcase" in registry
        True
        >>> registry.resolve("upcase")("abc", "en")
        'ABC'
    """

    __slots__ = ("_formatters",)

    def __init__(self, formatters: Mapping[str, Formatter] | None = None) -> None:
        """Initialize registry, optionally pre-populated."""
        self._formatters: dict[str, Formatter] = dict(formatters or {})

    def register(self, func: Formatter, *, name: str | None = None) -> None:
        """Register a formatter.

        Args:
            func: Formatting function
            name: Key used in messages (default: func.__name__)
        """
        key = name if name is not None else func.__name__
        self._formatters[key] = func

    def resolve(self, key: str) -> Formatter | None:
        """Return the formatter registered under key, or None."""
        return self._formatters.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._formatters

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __repr__(self) -> str:
        return f"FormatterRegistry(formatters={sorted(self._formatters)!r})"


# ============================================================================
# DEFAULT FORMATTERS
# ============================================================================


def _to_datetime(value: datetime | date | int | float | str) -> datetime | date:
    """Coerce a formatter argument to a date/datetime.

    Numbers are epoch milliseconds (the runtime's native timestamp unit).
    Strings must be ISO 8601.
    """
    match value:
        case datetime() | date():
            return value
        case int() | float():
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        case str():
            return datetime.fromisoformat(value)
        case _:
            msg = f"Cannot format {type(value).__name__} as a date"
            raise TypeError(msg)


def _date_style(param: FormatterParam) -> str:
    """Map a date/time parameter onto a CLDR format width."""
    match param:
        case "short" | "medium" | "long" | "full":
            return param
        case _:
            # None, "default" and unknown styles
            return "medium"


def number_formatter(config: MessageFormatConfig) -> Formatter:
    """Build the ``number`` formatter.

    Parameters: none (decimal), ``integer``, ``percent`` or ``currency``.
    Currency formatting uses ``config.currency``.

    Example:
        >>> from mfcompiler import MessageFormatConfig
        >>> fmt = number_formatter(MessageFormatConfig(currency="EUR"))
        >>> fmt(1234.5, "de-DE", "currency")
        '1.234,50\\xa0€'
    """
    currency = config.currency

    def number(
        value: int | float | Decimal, locale_code: str, param: FormatterParam = None, /
    ) -> str:
        locale = normalize_locale(locale_code)
        match param:
            case "integer":
                return babel_numbers.format_decimal(value, format="#,##0", locale=locale)
            case "percent":
                return babel_numbers.format_percent(value, locale=locale)
            case "currency":
                return babel_numbers.format_currency(value, currency, locale=locale)
            case _:
                return babel_numbers.format_decimal(value, locale=locale)

    return number


def date_formatter(config: MessageFormatConfig) -> Formatter:  # noqa: ARG001 - factory signature
    """Build the ``date`` formatter (parameters: short, default, long, full)."""

    def date_(
        value: datetime | date | int | float | str,
        locale_code: str,
        param: FormatterParam = None,
        /,
    ) -> str:
        return babel_dates.format_date(
            _to_datetime(value), format=_date_style(param), locale=normalize_locale(locale_code)
        )

    return date_


def time_formatter(config: MessageFormatConfig) -> Formatter:  # noqa: ARG001 - factory signature
    """Build the ``time`` formatter (parameters: short, default, long, full)."""

    def time_(
        value: datetime | time | int | float | str,
        locale_code: str,
        param: FormatterParam = None,
        /,
    ) -> str:
        if not isinstance(value, time):
            value = _to_datetime(value)
            # A bare date carries no time of day
            if not isinstance(value, datetime):
                msg = f"Cannot format {type(value).__name__} as a time"
                raise TypeError(msg)
        return babel_dates.format_time(
            value, format=_date_style(param), locale=normalize_locale(locale_code)
        )

    return time_


DEFAULT_FORMATTER_FACTORIES: Mapping[str, FormatterFactory] = MappingProxyType({
    "number": number_formatter,
    "date": date_formatter,
    "time": time_formatter,
})


def instantiate_default(entry: DefaultFormatter, config: MessageFormatConfig) -> Formatter:
    """Turn a default-table entry into the formatter to register.

    A factory takes exactly the owning config; a formatter needs at least a
    value and a locale code, so it cannot be called with the config alone.
    An entry that accepts the config is called with it, and its product is
    used when callable. Otherwise the entry is the formatter.

    Example:
        >>> from mfcompiler import MessageFormatConfig
        >>> def shout(value, locale_code, param=None, /):
        ...     return str(value).upper()
        >>> instantiate_default(shout, MessageFormatConfig()) is shout
        True
        >>> instantiate_default(number_formatter, MessageFormatConfig()).__name__
        'number'
    """
    try:
        signature(entry).bind(config)
    except TypeError:
        return entry  # type: ignore[return-value]
    except ValueError:
        # No introspectable signature (some builtins); treat as a factory
        pass

    product = entry(config)  # type: ignore[call-arg]
    if callable(product):
        return product
    logger.debug("Default entry %r is not a factory; using it as the formatter", entry)
    return entry  # type: ignore[return-value]
