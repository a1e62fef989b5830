"""Identifier and text utilities for emitted target source.

Pure helpers used by the compiler to turn arbitrary keys into safe target
source fragments:

    propname        d.count / d["class"] / "1x"
    funcname        pt-BR -> pt_BR, in -> _in
    bidi_mark_text  "\\u200f" + d.name + "\\u200f"

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import json
import re

from mfcompiler.constants import (
    LRM,
    RESERVED_FUNCTION_NAMES,
    RESERVED_PROPERTY_NAMES,
    RLM,
)
from mfcompiler.locale_utils import is_rtl_locale

__all__ = [
    "bidi_mark_text",
    "funcname",
    "js_literal",
    "propname",
]

# Bare identifier usable in dotted member access on every target runtime.
# ASCII only: non-ASCII identifiers are valid ES5 but not ES3.
_PROPERTY_NAME_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z_$][0-9A-Za-z_$]*")

_NON_WORD_RUN_PATTERN: re.Pattern[str] = re.compile(r"\W+", re.ASCII)


def js_literal(value: object) -> str:
    """Encode a value as a target-source literal (JSON text).

    Non-ASCII characters are emitted verbatim, matching JSON.stringify.
    Arrays use compact separators.

    Example:
        >>> js_literal('Hello "world"')
        '"Hello \\\\"world\\\\""'
        >>> js_literal(["a", "b"])
        '["a","b"]'
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def propname(key: str, obj: str | None = None) -> str:
    """Emit a property name, quoting it iff required.

    Quotes the key if it contains characters outside a bare identifier or is
    an ECMAScript 3rd Edition reserved word (for IE8).

    Args:
        key: Property key
        obj: Receiver expression; None to emit a bare key (object literal)

    Returns:
        ``obj.key`` / ``key`` when safe, otherwise ``obj["key"]`` / ``"key"``

    Example:
        >>> propname("count", "d")
        'd.count'
        >>> propname("class", "d")
        'd["class"]'
        >>> propname("1x")
        '"1x"'
    """
    if _PROPERTY_NAME_PATTERN.fullmatch(key) and key not in RESERVED_PROPERTY_NAMES:
        return f"{obj}.{key}" if obj else key
    jkey = js_literal(key)
    return f"{obj}[{jkey}]" if obj else jkey


def funcname(key: str) -> str:
    """Derive a function identifier from an arbitrary key.

    Runs of non-word characters become ``_``. A result that is an ES2015
    strict-mode reserved word or starts with a digit gets a leading ``_``.

    Example:
        >>> funcname("pt-BR")
        'pt_BR'
        >>> funcname("in")
        '_in'
        >>> funcname("3d view")
        '_3d_view'
    """
    fn = _NON_WORD_RUN_PATTERN.sub("_", key.strip())
    if fn in RESERVED_FUNCTION_NAMES or fn[:1].isdigit():
        return f"_{fn}"
    return fn


def bidi_mark_text(text: str, locale: str | None) -> str:
    """Wrap a text expression in Unicode directional marks.

    Enforces Bidi Structured Text: the interpolated value is isolated with
    RLM for right-to-left locales and LRM otherwise.

    Args:
        text: Target-source expression producing the text
        locale: Locale tag governing the surrounding message

    Returns:
        ``"<mark>" + text + "<mark>"`` source

    Example:
        >>> bidi_mark_text("d.name", "he") == '"\\u200f" + d.name + "\\u200f"'
        True
    """
    mark = js_literal(RLM if locale and is_rtl_locale(locale) else LRM)
    return f"{mark} + {text} + {mark}"
