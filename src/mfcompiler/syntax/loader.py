"""Conversion of parser JSON output into the token tree.

Upstream MessageFormat parsers emit plain JSON data:

    "text"                                              literal
    {"type": "argument", "arg": "name"}
    {"type": "select", "arg": "g", "cases": [{"key": "male", "tokens": [...]}]}
    {"type": "plural", "arg": "n", "offset": 1, "cases": [...]}
    {"type": "selectordinal", "arg": "n", "cases": [...]}
    {"type": "function", "arg": "x", "key": "number", "params": ["integer"]}
    {"type": "octothorpe"}

A template is a list of such tokens or a dict mapping keys to templates.
This module is the only place where that untyped data is inspected; the
compiler works on the typed tree from mfcompiler.syntax.ast.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from mfcompiler.diagnostics import ErrorTemplate, MalformedTokenError, UnrecognizedTokenError

from .ast import (
    Argument,
    Case,
    Catalog,
    FunctionCall,
    Message,
    Octothorpe,
    Plural,
    Select,
    SelectOrdinal,
    Template,
    Text,
    Token,
)

__all__ = ["template_from_json", "token_from_json", "tokens_from_json"]

type ParseFunction = Callable[[str], Sequence[Any]]


def template_from_json(data: Any, parse: ParseFunction | None = None) -> Template:
    """Build a Template from parser output.

    Args:
        data: A token list (Message) or a dict of key -> template (Catalog).
            A plain string is raw message source and needs ``parse``.
        parse: Parser turning raw message source into a token list

    Returns:
        Message or Catalog mirroring the shape of ``data``

    Raises:
        MalformedTokenError: Data is neither list, dict nor parseable string
        UnrecognizedTokenError: A token has an unknown ``type``

    Example:
        >>> template_from_json(["Hi ", {"type": "argument", "arg": "name"}])
        Message(tokens=(Text(value='Hi '), Argument(arg='name')))
    """
    match data:
        case str() if parse is not None:
            return Message(tokens_from_json(parse(data)))
        case str():
            raise MalformedTokenError(
                ErrorTemplate.malformed_token(data, "raw message source requires a parser")
            )
        case Mapping():
            return Catalog(
                {str(key): template_from_json(value, parse) for key, value in data.items()}
            )
        case Sequence():
            return Message(tokens_from_json(data))
        case _:
            raise MalformedTokenError(
                ErrorTemplate.malformed_token(data, "expected a token list or a mapping")
            )


def tokens_from_json(data: Sequence[Any]) -> tuple[Token, ...]:
    """Convert a list of parser tokens."""
    return tuple(token_from_json(item) for item in data)


def token_from_json(data: Any) -> Token:
    """Convert one parser token.

    Raises:
        UnrecognizedTokenError: Unknown or missing ``type``
        MalformedTokenError: Known ``type`` with missing fields
    """
    if isinstance(data, str):
        return Text(data)
    if not isinstance(data, Mapping):
        raise UnrecognizedTokenError(ErrorTemplate.unrecognized_token(data))

    try:
        match data.get("type"):
            case "argument":
                return Argument(data["arg"])
            case "select":
                return Select(data["arg"], _cases_from_json(data["cases"]))
            case "plural":
                return Plural(data["arg"], _cases_from_json(data["cases"]), data.get("offset") or 0)
            case "selectordinal":
                return SelectOrdinal(data["arg"], _cases_from_json(data["cases"]))
            case "function":
                params = data.get("params") or ()
                return FunctionCall(data["key"], data["arg"], tuple(params))
            case "octothorpe":
                return Octothorpe()
            case _:
                raise UnrecognizedTokenError(ErrorTemplate.unrecognized_token(dict(data)))
    except KeyError as e:
        raise MalformedTokenError(
            ErrorTemplate.malformed_token(dict(data), f"missing field {e.args[0]!r}")
        ) from e


def _cases_from_json(data: Sequence[Mapping[str, Any]]) -> tuple[Case, ...]:
    return tuple(Case(str(case["key"]), tokens_from_json(case.get("tokens", ()))) for case in data)
