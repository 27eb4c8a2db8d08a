"""Cucumber Expression parser module.

This module provides the main CucumberExpressionParser class and the grammar
rules it is built from, organized into focused submodules.

Module Organization:
- core.py: Main CucumberExpressionParser class and parse() entry point
- rules.py: All grammar rules (text, parameter, optional, alternation,
  expression) and the dispatch driver

Public API:
    CucumberExpressionParser: Main parser class
    ParseContext: Parse context passed to grammar rules (advanced usage)
"""

from cucumberexpr.syntax.parser.core import CucumberExpressionParser
from cucumberexpr.syntax.parser.rules import ParseContext

__all__ = ["CucumberExpressionParser", "ParseContext"]
