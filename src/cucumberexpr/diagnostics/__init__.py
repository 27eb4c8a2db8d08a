"""Diagnostic system for Cucumber Expression errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import CucumberExpressionError, ExpressionSyntaxError, GrammarDefectError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CucumberExpressionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExpressionSyntaxError",
    "GrammarDefectError",
    "OutputFormat",
    "SourceSpan",
]
