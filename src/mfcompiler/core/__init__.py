"""Core utilities shared by the compiler and introspection layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    propname, funcname, bidi_mark_text, js_literal: Identifier/text utilities

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError
from .identifiers import bidi_mark_text, funcname, js_literal, propname

__all__ = [
    "DepthGuard",
    "DepthLimitExceededError",
    "bidi_mark_text",
    "funcname",
    "js_literal",
    "propname",
]
