"""Cucumber Expression syntax package.

Provides tokenizer, parser, AST definitions, visitor pattern, and serialization.
Separate from any compiler so tooling (linters, formatters, IDE plugins) can
work on the AST directly.

Python 3.13+.
"""

from .ast import Node, Span
from .cursor import ParseResult, looking_at, looking_at_any, token_at
from .parser import CucumberExpressionParser
from .serializer import ExpressionSerializer, serialize
from .tokenizer import tokenize
from .tokens import Token
from .visitor import ASTVisitor

__all__ = [
    "ASTVisitor",
    "CucumberExpressionParser",
    "ExpressionSerializer",
    "Node",
    "ParseResult",
    "Span",
    "Token",
    "looking_at",
    "looking_at_any",
    "parse",
    "serialize",
    "token_at",
    "tokenize",
]


def parse(expression: str) -> Node:
    """Parse a Cucumber Expression into an AST.

    Convenience function for CucumberExpressionParser.parse().

    Args:
        expression: Cucumber Expression text

    Returns:
        Root ``expression`` node

    Example:
        >>> from cucumberexpr.syntax import parse
        >>> ast = parse("three blind/cripple mice")
        >>> [child.kind.value for child in ast.children]
        ['text', 'text', 'alternation', 'text', 'text']
    """
    parser = CucumberExpressionParser()
    return parser.parse(expression)
