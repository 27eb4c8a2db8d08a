"""Serialize a Cucumber Expression AST back to expression text.

Converts AST nodes to canonical expression source. Useful for:
- Formatters and code generators
- Property-based testing (roundtrip: parse -> serialize -> parse)

Escaping rules:
- ``{ } ( ) / \\`` inside text are always escaped
- Whitespace-only text outside an alternation is written verbatim, since the
  parser produces it from whitespace tokens
- Any other whitespace is escaped, so it cannot end an alternation early or
  split a text run

Python 3.13+.
"""

from cucumberexpr.constants import ESCAPABLE_CHARACTERS, ESCAPE_CHARACTER

from .ast import Node
from .visitor import ASTVisitor

__all__ = ["ExpressionSerializer", "serialize"]


def _escape(text: str) -> str:
    return "".join(
        ESCAPE_CHARACTER + char if char in ESCAPABLE_CHARACTERS or char.isspace() else char
        for char in text
    )


class ExpressionSerializer(ASTVisitor[str]):
    """Converts an AST to expression text.

    Instances keep track of whether they are inside an alternation, so use
    one instance per serialize() call.
    """

    __slots__ = ("_in_alternation",)

    def __init__(self) -> None:
        self._in_alternation = False

    def serialize(self, node: Node) -> str:
        """Serialize node and all of its descendants."""
        return self.visit(node)

    def _join(self, node: Node) -> str:
        return "".join(self.visit(child) for child in node.children)

    def visit_expression(self, node: Node) -> str:
        return self._join(node)

    def visit_alternative(self, node: Node) -> str:
        return self._join(node)

    def visit_parameter(self, node: Node) -> str:
        return "{" + self._join(node) + "}"

    def visit_optional(self, node: Node) -> str:
        return "(" + self._join(node) + ")"

    def visit_alternation(self, node: Node) -> str:
        outer = self._in_alternation
        self._in_alternation = True
        try:
            return "/".join(self.visit(alternative) for alternative in node.children)
        finally:
            self._in_alternation = outer

    def visit_text(self, node: Node) -> str:
        if node.text.isspace() and not self._in_alternation:
            return node.text
        return _escape(node.text)

    def generic_visit(self, node: Node) -> str:
        return self._join(node)


def serialize(node: Node) -> str:
    """Serialize an AST to expression text.

    Args:
        node: Root node (usually an ``expression`` node)

    Returns:
        Expression text that parses to an equivalent AST

    Example:
        >>> from cucumberexpr.syntax import parse
        >>> serialize(parse("I have {int} cucumber(s)"))
        'I have {int} cucumber(s)'
        >>> serialize(parse("a\\\\/b"))
        'a\\\\/b'
    """
    return ExpressionSerializer().serialize(node)
