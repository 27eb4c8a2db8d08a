"""Tokenizer for Cucumber Expressions.

Splits an expression into a total, ordered sequence of typed tokens:

- Runs of whitespace become one WHITE_SPACE token
- Runs of other characters become one TEXT token
- Each of ``{ } ( ) /`` becomes a token of its own type
- ``\\`` escapes the following character, which then counts as text

The token sequence never contains START_OF_LINE or END_OF_LINE tokens; the
parser synthesizes those boundaries from positions.

Python 3.13+.
"""

from cucumberexpr.constants import ESCAPABLE_CHARACTERS, ESCAPE_CHARACTER, SYMBOL_TOKEN_TYPES
from cucumberexpr.diagnostics import ErrorTemplate, ExpressionSyntaxError
from cucumberexpr.enums import TokenType

from .tokens import Token

__all__ = ["can_escape", "tokenize"]

# Only these token types merge consecutive characters into a single token.
_MERGEABLE_TYPES = frozenset({TokenType.TEXT, TokenType.WHITE_SPACE})


def can_escape(char: str) -> bool:
    """Check if char may follow the escape character."""
    return char in ESCAPABLE_CHARACTERS or char.isspace()


def _type_of(char: str) -> TokenType:
    if char.isspace():
        return TokenType.WHITE_SPACE
    return SYMBOL_TOKEN_TYPES.get(char, TokenType.TEXT)


def tokenize(expression: str) -> tuple[Token, ...]:
    """Tokenize a Cucumber Expression.

    Args:
        expression: Expression source text

    Returns:
        Tokens covering the whole expression in offset order. Empty for an
        empty expression.

    Raises:
        ExpressionSyntaxError: If a character that cannot be escaped follows
            the escape character, or the expression ends with an unpaired
            escape character.

    Example:
        >>> [t.type.value for t in tokenize("a {int}")]
        ['text', 'white-space', 'begin-parameter', 'text', 'end-parameter']
    """
    tokens: list[Token] = []
    buffer: list[str] = []
    buffer_type: TokenType | None = None
    buffer_start = 0
    escape_start: int | None = None

    for index, char in enumerate(expression):
        if escape_start is None and char == ESCAPE_CHARACTER:
            escape_start = index
            continue

        if escape_start is not None:
            if not can_escape(char):
                raise ExpressionSyntaxError(ErrorTemplate.cannot_escape(expression, index))
            # Escaped characters are text; the span starts at the escape character.
            char_type = TokenType.TEXT
            char_start = escape_start
            escape_start = None
        else:
            char_type = _type_of(char)
            char_start = index

        if buffer_type is None:
            buffer_start = char_start
        elif char_type != buffer_type or char_type not in _MERGEABLE_TYPES:
            tokens.append(Token(buffer_type, buffer_start, char_start, "".join(buffer)))
            buffer = []
            buffer_start = char_start

        buffer_type = char_type
        buffer.append(char)

    if escape_start is not None:
        raise ExpressionSyntaxError(ErrorTemplate.end_of_line_escaped(expression))

    if buffer_type is not None:
        tokens.append(Token(buffer_type, buffer_start, len(expression), "".join(buffer)))

    return tuple(tokens)
