"""Token tree package.

Provides the token and template definitions, conversion from parser JSON
output, and a depth-guarded visitor for read-only tree walks.

Python 3.13+.
"""

from .ast import (
    Argument,
    Case,
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
from .loader import template_from_json, token_from_json, tokens_from_json
from .visitor import TokenVisitor

__all__ = [
    "Argument",
    "Case",
    "Catalog",
    "FunctionCall",
    "Message",
    "Octothorpe",
    "Plural",
    "PluralToken",
    "Select",
    "SelectOrdinal",
    "Template",
    "Text",
    "Token",
    "TokenVisitor",
    "template_from_json",
    "token_from_json",
    "tokens_from_json",
]
