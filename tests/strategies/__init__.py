"""Hypothesis strategies for mfcompiler property-based testing.

- tokens: Token, Message and Catalog strategies

Usage:
    from tests.strategies import messages, catalogs, identifiers
"""

from .tokens import (
    argument_keys,
    case_tokens,
    catalogs,
    identifiers,
    locale_tags,
    messages,
    missing_other_cases,
    plural_tokens,
    select_tokens,
    text_tokens,
    tokens,
)

__all__ = [
    "argument_keys",
    "case_tokens",
    "catalogs",
    "identifiers",
    "locale_tags",
    "messages",
    "missing_other_cases",
    "plural_tokens",
    "select_tokens",
    "text_tokens",
    "tokens",
]
