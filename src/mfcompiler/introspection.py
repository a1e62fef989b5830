"""Template introspection for argument and formatter extraction.

Read-only analysis of a Message or Catalog: which input keys the compiled
functions will read, which formatters they call, and whether they need
select/plural support. Useful for validating data contracts and for
pre-computing the formatter set before compilation.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from mfcompiler.syntax.ast import (
    Argument,
    FunctionCall,
    Octothorpe,
    Plural,
    Select,
    SelectOrdinal,
    Template,
)
from mfcompiler.syntax.visitor import TokenVisitor

__all__ = [
    "IntrospectionVisitor",
    "TemplateIntrospection",
    "extract_arguments",
    "introspect_template",
]


@dataclass(frozen=True, slots=True)
class TemplateIntrospection:
    """Summary of what a template reads and calls.

    Attributes:
        arguments: Argument keys read from the data mapping
        formatters: Formatter keys invoked by FunctionCall tokens
        uses_select: Any Select token present
        uses_plural: Any Plural or SelectOrdinal token present
        uses_octothorpe: Any Octothorpe inside a plural context
    """

    arguments: frozenset[str]
    formatters: frozenset[str]
    uses_select: bool
    uses_plural: bool
    uses_octothorpe: bool


class IntrospectionVisitor(TokenVisitor):
    """Collects argument keys, formatter keys and feature usage."""

    def __init__(self) -> None:
        super().__init__()
        self.arguments: set[str] = set()
        self.formatters: set[str] = set()
        self.uses_select = False
        self.uses_plural = False
        self.uses_octothorpe = False
        self._plural_depth = 0

    def visit_Argument(self, node: Argument) -> Argument:
        self.arguments.add(node.arg)
        return node

    def visit_FunctionCall(self, node: FunctionCall) -> FunctionCall:
        self.arguments.add(node.arg)
        self.formatters.add(node.key)
        return node

    def visit_Select(self, node: Select) -> Select:
        self.arguments.add(node.arg)
        self.uses_select = True
        return self.generic_visit(node)

    def visit_Plural(self, node: Plural) -> Plural:
        return self._visit_plural(node)

    def visit_SelectOrdinal(self, node: SelectOrdinal) -> SelectOrdinal:
        return self._visit_plural(node)

    def visit_Octothorpe(self, node: Octothorpe) -> Octothorpe:
        # Outside a plural context '#' is literal text
        if self._plural_depth:
            self.uses_octothorpe = True
        return node

    def _visit_plural[T: (Plural, SelectOrdinal)](self, node: T) -> T:
        self.arguments.add(node.arg)
        self.uses_plural = True
        self._plural_depth += 1
        try:
            return self.generic_visit(node)
        finally:
            self._plural_depth -= 1


def introspect_template(template: Template) -> TemplateIntrospection:
    """Analyze a Message or Catalog.

    Example:
        >>> info = introspect_template(Message((Text("Hi "), Argument("name"))))
        >>> info.arguments
        frozenset({'name'})
    """
    visitor = IntrospectionVisitor()
    visitor.visit(template)
    return TemplateIntrospection(
        arguments=frozenset(visitor.arguments),
        formatters=frozenset(visitor.formatters),
        uses_select=visitor.uses_select,
        uses_plural=visitor.uses_plural,
        uses_octothorpe=visitor.uses_octothorpe,
    )


def extract_arguments(template: Template) -> frozenset[str]:
    """Argument keys read anywhere in template."""
    return introspect_template(template).arguments
