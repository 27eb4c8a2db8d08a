"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (problems in the expression text)
        9000-9999: Grammar defects (internal parser inconsistencies)
    """

    # Syntax errors (1000-1999)
    MISSING_END_TOKEN = 1001
    CANNOT_ESCAPE = 1002
    END_OF_LINE_ESCAPED = 1003
    EXPRESSION_TOO_LONG = 1004

    # Grammar defects (9000-9999)
    # Unreachable while the parser tables cover every token type.
    NO_ELIGIBLE_PARSER = 9001
    UNCONSUMED_TOKENS = 9002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Expression location for error reporting.

    Cucumber Expressions are single-line, so only the column is tracked.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or column is
                less than 1 (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, start: int, end: int | None = None) -> "SourceSpan":
        """Build a span from offsets, deriving the column from start."""
        return cls(start=start, end=start if end is None else end, column=start + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable problem description
        span: Location in the expression (None when not tied to a position)
        hint: Suggestion for fixing the error
        expression: The expression text the span points into
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expression: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default output style.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            This Cucumber Expression has a problem at column 1:

            {color
            ^
            The '{' does not have a matching '}'.
            If you did not intend to use a parameter you can use '\\{' to escape a parameter

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
