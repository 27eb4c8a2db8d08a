"""Token model shared by the tokenizer and the parser.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from cucumberexpr.enums import TokenType

__all__ = ["Token"]


@dataclass(frozen=True, slots=True)
class Token:
    """Typed slice of an expression.

    Attributes:
        type: Token type
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
        text: Literal text with escape characters removed

    Example:
        Source: "\\(a)"
        Token(TokenType.TEXT, 0, 3, "(a")  # span includes the backslash
        Token(TokenType.END_OPTIONAL, 3, 4, ")")
    """

    type: TokenType
    start: int
    end: int
    text: str = ""

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Token start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Token end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
