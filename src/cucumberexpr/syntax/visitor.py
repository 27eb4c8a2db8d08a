"""Visitor pattern for AST traversal.

Enables tools to traverse the Cucumber Expression AST without modifying the
node class: compilers turning the AST into a regular expression, linters and
the serializer.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_<kind> after the node's NodeType value, e.g.
visit_parameter, visit_alternation.

Type Parameters:
- ASTVisitor[T] is generic over return type T
- ASTVisitor (no type param) defaults to T=Node

Python 3.13+.
"""

from collections.abc import Callable
from typing import cast

from cucumberexpr.enums import NodeType

from .ast import Node

__all__ = ["ASTVisitor"]


class ASTVisitor[T = Node]:
    """Base visitor for traversing the Cucumber Expression AST.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_<kind> methods to add custom
    behavior.

    Example:
        >>> from cucumberexpr.syntax import parse
        >>> class ParameterNames(ASTVisitor):
        ...     def __init__(self) -> None:
        ...         self.names: list[str] = []
        ...
        ...     def visit_parameter(self, node: Node) -> Node:
        ...         self.names.append("".join(child.text for child in node.children))
        ...         return node
        ...
        >>> visitor = ParameterNames()
        >>> _ = visitor.visit(parse("{int} and {word}"))
        >>> visitor.names
        ['int', 'word']
    """

    __slots__ = ()

    def visit(self, node: Node) -> T:
        """Visit a node by dispatching on its kind.

        Args:
            node: AST node to visit

        Returns:
            Result of the visit_<kind> method, or generic_visit() when the
            subclass does not define one
        """
        method: Callable[[Node], T] = getattr(self, _VISIT_METHODS[node.kind], self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node) -> T:
        """Visit all children of node and return node itself."""
        for child in node.children:
            self.visit(child)
        return cast(T, node)


_VISIT_METHODS: dict[NodeType, str] = {kind: f"visit_{kind.value}" for kind in NodeType}
