"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Line breaks never belong in a pointer line.
_LINE_BREAKS = frozenset("\r\n\v\f\x1c\x1d\x1e\x85\u2028\u2029")


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    CUCUMBER = "cucumber"  # Expression with a caret pointer (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def point_at(span: SourceSpan, expression: str = "") -> str:
    """Build a pointer line marking span under the expression text.

    A single-character span is marked with one caret; a wider span is
    marked with carets at both ends joined by dashes. Whitespace preceding
    the span in expression (tabs in particular) is copied into the padding
    so the caret stays aligned when the two lines are printed together.

    Example:
        >>> point_at(SourceSpan.at(2, 3))
        '  ^'
        >>> point_at(SourceSpan.at(1, 5))
        ' ^--^'
        >>> point_at(SourceSpan.at(2, 3), "\\tx{")
        '\\t ^'
    """
    padding = "".join(
        char if char.isspace() and char not in _LINE_BREAKS else " "
        for char in expression[: span.start]
    )
    pointer = padding.ljust(span.start) + "^"
    if span.end - span.start > 1:
        pointer += "-" * (span.end - span.start - 2) + "^"
    return pointer


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (cucumber, simple, json)
        sanitize: Truncate content to prevent information leakage
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> from cucumberexpr.diagnostics import ErrorTemplate
        >>> from cucumberexpr.enums import TokenType
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.missing_end_token(
        ...     "{color", TokenType.BEGIN_PARAMETER, TokenType.END_PARAMETER, 0, 1
        ... )
        >>> print(formatter.format(diagnostic))
        This Cucumber Expression has a problem at column 1:
        <BLANKLINE>
        {color
        ^
        The '{' does not have a matching '}'.
        If you did not intend to use a parameter you can use '\\{' to escape a parameter

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MISSING_END_TOKEN: The '{' does not have a matching '}'
    """

    output_format: OutputFormat = OutputFormat.CUCUMBER
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.CUCUMBER:
                return self._format_cucumber(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_cucumber(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic with the expression and a pointer.

        Example output:
            This Cucumber Expression has a problem at column 1:

            {color
            ^
            The '{' does not have a matching '}'.
            If you did not intend to use a parameter you can use '\\{' to escape a parameter

        Diagnostics without a location fall back to a compact form:
            error[UNCONSUMED_TOKENS]: Could not parse ...
              = help: ...
        """
        if diagnostic.span is None or diagnostic.expression is None:
            parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]
            if diagnostic.hint:
                parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")
            return "\n".join(parts)

        parts = [
            f"This Cucumber Expression has a problem at column {diagnostic.span.column}:",
            "",
            self._maybe_sanitize(diagnostic.expression),
            point_at(diagnostic.span, diagnostic.expression),
            f"{diagnostic.message}.",
        ]
        if diagnostic.hint:
            parts.append(self._maybe_sanitize(diagnostic.hint))
        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MISSING_END_TOKEN: The '{' does not have a matching '}'
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MISSING_END_TOKEN", "message": "...", "severity": "error"}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.expression is not None:
            data["expression"] = self._maybe_sanitize(diagnostic.expression)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
