"""Token stream access for the Cucumber Expression parser.

Parsers never hold a mutable position. Each one receives the token tuple and
an integer position, and reports how many tokens it consumed.

Design Philosophy:
    - Token tuple is immutable and holds only real tokens
    - Boundaries are virtual: position -1 is START_OF_LINE and any position
      at or past the end is END_OF_LINE
    - A declined parse is ``None``, not an exception
    - Every successful parse consumes at least one token (enforced by the
      driver, which prevents infinite loops)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from cucumberexpr.enums import TokenType

from .tokens import Token

__all__ = ["ParseResult", "looking_at", "looking_at_any", "token_at"]


def looking_at(tokens: Sequence[Token], position: int, token_type: TokenType) -> bool:
    """Check if the token at position has the given type.

    Positions outside the token sequence match the virtual boundaries.

    Example:
        >>> tokens = (Token(TokenType.TEXT, 0, 1, "a"),)
        >>> looking_at(tokens, -1, TokenType.START_OF_LINE)
        True
        >>> looking_at(tokens, 0, TokenType.TEXT)
        True
        >>> looking_at(tokens, 1, TokenType.END_OF_LINE)
        True
        >>> looking_at(tokens, 1, TokenType.TEXT)
        False
    """
    if position < 0:
        return token_type == TokenType.START_OF_LINE
    if position >= len(tokens):
        return token_type == TokenType.END_OF_LINE
    return tokens[position].type == token_type


def looking_at_any(tokens: Sequence[Token], position: int, *token_types: TokenType) -> bool:
    """Check if the token at position has any of the given types."""
    return any(looking_at(tokens, position, token_type) for token_type in token_types)


def token_at(tokens: Sequence[Token], position: int) -> Token:
    """Get the token at position, synthesizing virtual boundary tokens.

    Returns:
        The real token, a zero-width START_OF_LINE token at offset 0 for
        negative positions, or a zero-width END_OF_LINE token at the end of
        the last real token for positions past the end.
    """
    if position < 0:
        return Token(TokenType.START_OF_LINE, 0, 0)
    if position >= len(tokens):
        end = tokens[-1].end if tokens else 0
        return Token(TokenType.END_OF_LINE, end, end)
    return tokens[position]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing the parsed value and the consumed token count.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(context: ParseContext, position: int) -> ParseResult[Node] | None:
                ...
                return ParseResult(node, consumed)

        ``None`` means the parser does not apply at position (declined).
    """

    value: T
    consumed: int
