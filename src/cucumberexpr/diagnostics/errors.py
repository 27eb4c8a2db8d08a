"""Cucumber Expression exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CucumberExpressionError",
    "ExpressionSyntaxError",
    "GrammarDefectError",
]


class CucumberExpressionError(Exception):
    """Base exception for all Cucumber Expression errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CucumberExpressionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ExpressionSyntaxError(CucumberExpressionError):
    """Problem in the expression text.

    Raised for unterminated parameters and optionals, invalid escapes and
    oversized input. Parsing aborts; no partial tree is returned.
    """


class GrammarDefectError(CucumberExpressionError):
    """Internal inconsistency between the grammar tables and the token stream.

    Examples:
    - No parser in a rule's parser list accepted a token
    - Tokens were left over after the expression rule finished

    Never raised for user input while the grammar is assembled correctly.
    """
