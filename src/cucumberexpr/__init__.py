"""cucumberexpr - Cucumber Expression parser.

Parses Cucumber Expressions such as ``I have {int} cucumber(s) in my belly/stomach``
into a typed AST with exact source offsets on every node, ready for a
downstream compiler to turn into a matcher.

Public API:
    parse_expression - Parse expression text to AST
    serialize_expression - Serialize AST to expression text
    CucumberExpressionParser - Configurable parser class
    Node - AST node type
    NodeType, TokenType - Node and token discriminants

Exceptions:
    CucumberExpressionError - Base exception class
    ExpressionSyntaxError - Problems in the expression text
    GrammarDefectError - Internal parser inconsistencies

Submodules:
    cucumberexpr.syntax - Tokenizer, parser, AST, visitor, serializer
    cucumberexpr.diagnostics - Error codes, templates and formatting
"""

from .diagnostics import CucumberExpressionError, ExpressionSyntaxError, GrammarDefectError
from .enums import NodeType, TokenType
from .syntax import CucumberExpressionParser, Node
from .syntax import parse as parse_expression
from .syntax import serialize as serialize_expression

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cucumberexpr")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CucumberExpressionError",
    "CucumberExpressionParser",
    "ExpressionSyntaxError",
    "GrammarDefectError",
    "Node",
    "NodeType",
    "TokenType",
    "__version__",
    "parse_expression",
    "serialize_expression",
]
