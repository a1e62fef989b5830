"""Visitor pattern for token tree traversal.

Enables tools to walk templates without modifying token classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name.

Python 3.13+.
"""

from collections.abc import Callable, Mapping
from dataclasses import Field, fields
from typing import Any, ClassVar

from mfcompiler.constants import MAX_DEPTH
from mfcompiler.core.depth_guard import DepthGuard

__all__ = ["TokenVisitor"]


class TokenVisitor:
    """Base visitor for traversing templates and tokens.

    generic_visit() automatically traverses all child nodes: case bodies,
    message token sequences and catalog entries. Override visit_NodeType
    methods to add custom behavior.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__.

    Example:
        >>> class CountArguments(TokenVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_Argument(self, node):
        ...         self.count += 1
        ...         return self.generic_visit(node)
        ...
        >>> visitor = CountArguments()
        >>> visitor.visit(template)
        >>> print(visitor.count)
    """

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    # Dataclass fields per node type, shared by all visitors
    _fields_cache: ClassVar[dict[type, tuple[Field[Any], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            name[6:]: name for name in dir(cls) if name.startswith("visit_")
        }

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH from constants)
        """
        self._depth_guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
        self._instance_dispatch_cache: dict[type, Callable[[Any], Any]] = {}

    def visit(self, node: Any) -> Any:
        """Visit a node, dispatching to visit_<ClassName> or generic_visit."""
        node_type = type(node)
        method = self._instance_dispatch_cache.get(node_type)
        if method is None:
            method_name = self._class_visit_methods.get(node_type.__name__)
            method = getattr(self, method_name) if method_name else self.generic_visit
            self._instance_dispatch_cache[node_type] = method
        return method(node)

    def generic_visit(self, node: Any) -> Any:
        """Default visitor (traverses children with depth protection).

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            for field in self._get_node_fields(type(node)):
                value = getattr(node, field.name)
                if isinstance(value, Mapping):
                    for item in value.values():
                        self.visit(item)
                elif isinstance(value, tuple):
                    for item in value:
                        if hasattr(item, "__dataclass_fields__"):
                            self.visit(item)
                elif hasattr(value, "__dataclass_fields__"):
                    self.visit(value)
        return node

    @classmethod
    def _get_node_fields(cls, node_type: type) -> tuple[Field[Any], ...]:
        if node_type not in TokenVisitor._fields_cache:
            TokenVisitor._fields_cache[node_type] = fields(node_type)
        return TokenVisitor._fields_cache[node_type]
