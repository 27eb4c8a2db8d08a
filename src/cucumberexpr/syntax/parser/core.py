"""Core Cucumber Expression parser implementation.

This module provides the CucumberExpressionParser class that orchestrates
tokenizing an expression and parsing it into the AST defined in
:mod:`cucumberexpr.syntax.ast`.

Architecture:
    The expression is tokenized by :func:`~cucumberexpr.syntax.tokenizer.tokenize`.
    The grammar rules in :mod:`~cucumberexpr.syntax.parser.rules` then walk the
    token tuple by position. Each rule returns a
    :class:`~cucumberexpr.syntax.cursor.ParseResult` holding the node and the
    consumed token count, or None when it does not apply.

AST Types:
    The parser produces a single ``expression`` :class:`~cucumberexpr.syntax.ast.Node`
    whose children are ``text``, ``optional``, ``parameter`` and ``alternation``
    nodes. Alternations hold ``alternative`` nodes.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large expressions.
"""

import logging
from collections.abc import Sequence

from cucumberexpr.constants import MAX_EXPRESSION_LENGTH
from cucumberexpr.diagnostics import (
    ErrorTemplate,
    ExpressionSyntaxError,
    GrammarDefectError,
)
from cucumberexpr.syntax.ast import Node
from cucumberexpr.syntax.parser.rules import ParseContext, parse_expression
from cucumberexpr.syntax.tokenizer import tokenize
from cucumberexpr.syntax.tokens import Token

__all__ = ["CucumberExpressionParser"]

logger = logging.getLogger(__name__)

# Truncation limit for expressions echoed in log messages.
_LOG_TRUNCATE = 100


class CucumberExpressionParser:
    """Cucumber Expression parser.

    Design:
    - Stateless between calls: every parse builds its own ParseContext, so
      one parser instance is safe to share between threads
    - Either returns a complete tree or raises; never a partial tree

    Security:
    - Configurable max_expression_length prevents DoS via large inputs
    - Default limit: 64 KiB of characters

    Attributes:
        max_expression_length: Maximum allowed expression length in characters
    """

    __slots__ = ("_max_expression_length",)

    def __init__(self, *, max_expression_length: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_expression_length: Maximum expression length in characters
                (default: 64 KiB). Set to 0 to disable the limit.
        """
        self._max_expression_length = (
            max_expression_length
            if max_expression_length is not None
            else MAX_EXPRESSION_LENGTH
        )

    @property
    def max_expression_length(self) -> int:
        """Maximum allowed expression length in characters."""
        return self._max_expression_length

    def parse(self, expression: str) -> Node:
        """Parse a Cucumber Expression into an AST.

        Args:
            expression: Expression text, e.g. ``"I have {int} cucumber(s)"``

        Returns:
            Root ``expression`` node spanning the whole input

        Raises:
            ExpressionSyntaxError: If the expression is too long, contains an
                invalid escape, or opens a parameter or optional without
                closing it
            GrammarDefectError: If the grammar rules failed to consume the
                token stream (internal defect)

        Example:
            >>> parser = CucumberExpressionParser()
            >>> ast = parser.parse("I have {int} cucumber(s)")
            >>> [child.kind.value for child in ast.children]
            ['text', 'text', 'text', 'text', 'parameter', 'text', 'text', 'optional']
        """
        try:
            if self._max_expression_length > 0 and len(expression) > self._max_expression_length:
                raise ExpressionSyntaxError(
                    ErrorTemplate.expression_too_long(len(expression), self._max_expression_length)
                )
            tokens = tokenize(expression)
        except ExpressionSyntaxError as e:
            logger.debug("Syntax error in %s: %s", self._describe(expression), e.diagnostic)
            raise

        # parse_tokens() logs its own outcome
        return self.parse_tokens(tokens, expression=expression)

    def parse_tokens(self, tokens: Sequence[Token], *, expression: str | None = None) -> Node:
        """Parse an already tokenized expression.

        Args:
            tokens: Real tokens in offset order (no boundary tokens)
            expression: Source text for diagnostics (optional)

        Returns:
            Root ``expression`` node

        Raises:
            ExpressionSyntaxError: If a parameter or optional is not closed
            GrammarDefectError: If the tokens were not fully consumed
        """
        context = ParseContext(tokens=tuple(tokens), expression=expression)
        # Both virtual boundary slots count as consumed tokens.
        total = len(context.tokens) + 2

        try:
            # Start at the virtual START_OF_LINE slot
            result = parse_expression(context, -1)
            if result is None or result.consumed != total:
                consumed = 0 if result is None else result.consumed
                raise GrammarDefectError(
                    ErrorTemplate.unconsumed_tokens(expression, consumed, total)
                )
        except GrammarDefectError as e:
            logger.error("Grammar defect while parsing %s: %s", self._describe(expression), e)
            raise
        except ExpressionSyntaxError as e:
            logger.debug("Syntax error in %s: %s", self._describe(expression), e.diagnostic)
            raise

        logger.debug(
            "Parsed %s: %d tokens, %d top-level nodes",
            self._describe(expression),
            len(context.tokens),
            len(result.value.children),
        )
        return result.value

    @staticmethod
    def _describe(expression: str | None) -> str:
        if expression is None:
            return "<tokens>"
        # repr() escapes control characters in log output.
        return repr(expression[:_LOG_TRUNCATE])
