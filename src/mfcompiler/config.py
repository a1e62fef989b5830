"""Compiler configuration owner.

MessageFormatConfig is the context a Compiler is bound to. It supplies the
feature flags and the formatter registry, and lazily instantiates default
formatters on first use.

Not thread-safe: lazy formatter population mutates the registry.
Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar

from mfcompiler.formatters import (
    DEFAULT_FORMATTER_FACTORIES,
    DefaultFormatter,
    Formatter,
    FormatterRegistry,
    instantiate_default,
)

__all__ = ["MessageFormatConfig"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MessageFormatConfig:
    """Configuration owner for compilation.

    Attributes:
        bidi_support: Wrap interpolated arguments in Unicode directional marks
        intl_support: Allow lazy instantiation of default formatters
        currency: ISO 4217 code used by the default ``number`` formatter
        formatters: Live formatter registry (key -> formatter)

    Class Attributes:
        default_formatters: Table consulted when a key is missing from
            ``formatters``. Entries are factories taking the config, or
            ready-made formatters. Override on a subclass to change defaults.

    Example:
        >>> config = MessageFormatConfig()
        >>> config.resolve_formatter("number") is not None
        True
        >>> "number" in config.formatters
        True
    """

    default_formatters: ClassVar[Mapping[str, DefaultFormatter]] = DEFAULT_FORMATTER_FACTORIES

    bidi_support: bool = False
    intl_support: bool = True
    currency: str = "USD"
    formatters: FormatterRegistry = field(default_factory=FormatterRegistry)

    def add_formatter(self, name: str, func: Formatter) -> None:
        """Register a custom formatter under name."""
        self.formatters.register(func, name=name)
        logger.debug("Added custom formatter: %s", name)

    def resolve_formatter(self, key: str) -> Formatter | None:
        """Resolve a formatter key, instantiating a default on first miss.

        The default table is only consulted when ``intl_support`` is on;
        the resulting formatter is memoized in ``formatters``.

        Returns:
            The formatter, or None when the key is unknown
        """
        formatter = self.formatters.resolve(key)
        if formatter is not None or not self.intl_support:
            return formatter

        entry = type(self).default_formatters.get(key)
        if entry is None:
            return None

        formatter = instantiate_default(entry, self)
        self.formatters.register(formatter, name=key)
        logger.debug("Instantiated default formatter: %s", key)
        return formatter
