"""Shared constants for cucumberexpr.

This module provides centralized configuration constants used across the
syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Syntax: Special characters recognized by the tokenizer

Python 3.13+. Zero external dependencies.
"""

from cucumberexpr.enums import TokenType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_EXPRESSION_LENGTH",
    # Syntax
    "ESCAPE_CHARACTER",
    "ESCAPABLE_CHARACTERS",
    "SYMBOL_TOKEN_TYPES",
    "TOKEN_SYMBOLS",
    "TOKEN_PURPOSES",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum expression length in characters (64 KiB).
# Step expressions are short human-authored strings; anything this long is
# almost certainly generated or adversarial input.
MAX_EXPRESSION_LENGTH: int = 64 * 1024

# ============================================================================
# SYNTAX
# ============================================================================

ESCAPE_CHARACTER: str = "\\"

# Characters with a token type of their own. Everything else is text or
# whitespace.
SYMBOL_TOKEN_TYPES: dict[str, TokenType] = {
    "{": TokenType.BEGIN_PARAMETER,
    "}": TokenType.END_PARAMETER,
    "(": TokenType.BEGIN_OPTIONAL,
    ")": TokenType.END_OPTIONAL,
    "/": TokenType.ALTERNATION,
}

# Whitespace is escapable too; it is checked with str.isspace().
ESCAPABLE_CHARACTERS: frozenset[str] = frozenset(SYMBOL_TOKEN_TYPES) | {ESCAPE_CHARACTER}

TOKEN_SYMBOLS: dict[TokenType, str] = {
    token_type: symbol for symbol, token_type in SYMBOL_TOKEN_TYPES.items()
}

# Human-readable purpose of each bracket, used in diagnostics.
TOKEN_PURPOSES: dict[TokenType, str] = {
    TokenType.BEGIN_PARAMETER: "a parameter",
    TokenType.END_PARAMETER: "a parameter",
    TokenType.BEGIN_OPTIONAL: "optional text",
    TokenType.END_OPTIONAL: "optional text",
    TokenType.ALTERNATION: "alternation",
}
