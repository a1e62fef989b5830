"""Locale utilities for tag normalization and direction lookup.

Centralizes locale format handling used by the compiler: BCP-47/POSIX
conversion, the right-to-left table used for bidi marks, and Babel-backed
discovery of locales with CLDR plural rules.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from mfcompiler.constants import RTL_LOCALE_PATTERNS

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "available_plural_locales",
    "get_babel_locale",
    "is_rtl_locale",
    "normalize_locale",
    "to_bcp47",
]

_RTL_PATTERN: re.Pattern[str] = re.compile("|".join(f"^{p}" for p in RTL_LOCALE_PATTERNS))


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pa-Arab")
        'pa_Arab'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert POSIX locale code to BCP-47 format.

    Example:
        >>> to_bcp47("uz_Arab_AF")
        'uz-Arab-AF'
    """
    return locale_code.replace("_", "-")


def is_rtl_locale(locale_code: str) -> bool:
    """Check whether a locale tag denotes a right-to-left language.

    Matches tag prefixes against RTL_LOCALE_PATTERNS. Both BCP-47 and POSIX
    separators are accepted.

    Example:
        >>> is_rtl_locale("ar-EG")
        True
        >>> is_rtl_locale("ks")
        True
        >>> is_rtl_locale("ksh")
        False
        >>> is_rtl_locale("pa_Arab")
        True
        >>> is_rtl_locale("pa")
        False
    """
    return _RTL_PATTERN.match(to_bcp47(locale_code)) is not None


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def available_plural_locales(candidates: Iterable[str] | None = None) -> frozenset[str]:
    """Collect locale keys that have CLDR plural rules available.

    The result is meant for the ``plural_locales`` argument of
    ``Compiler.compile``: catalog keys found in it rebind the locale whose
    plural-rule function subordinate plural tokens reference.

    Args:
        candidates: Locale keys to check (e.g. the top-level keys of a
            catalog). None checks every locale Babel ships.

    Returns:
        The subset of candidates Babel can parse, in their original spelling
    """
    from babel import UnknownLocaleError, localedata  # noqa: PLC0415

    if candidates is None:
        return frozenset(to_bcp47(lc) for lc in localedata.locale_identifiers())

    found: set[str] = set()
    for locale_code in candidates:
        try:
            get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError):
            continue
        found.add(locale_code)
    return frozenset(found)
