"""Hypothesis strategies for cucumberexpr property-based testing.

Usage:
    from tests.strategies import expressions, alternations
    from tests.strategies.expressions import unterminated_expressions

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - escaped_words, parameters, optionals
    - alternations, expressions, unterminated_expressions
"""

from .expressions import (
    CHAOS_ALPHABET,
    ESCAPE_SEQUENCES,
    WHITESPACE_RUNS,
    WORD_CHARS,
    alternations,
    alternative_bodies,
    chaos_strings,
    escaped_words,
    escapes,
    expressions,
    optionals,
    parameters,
    unterminated_expressions,
    whitespace,
    words,
)

__all__ = [
    "CHAOS_ALPHABET",
    "ESCAPE_SEQUENCES",
    "WHITESPACE_RUNS",
    "WORD_CHARS",
    "alternations",
    "alternative_bodies",
    "chaos_strings",
    "escaped_words",
    "escapes",
    "expressions",
    "optionals",
    "parameters",
    "unterminated_expressions",
    "whitespace",
    "words",
]
