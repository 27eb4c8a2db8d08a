"""Enumerations for cucumberexpr type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenType(StrEnum):
    """Type of a Cucumber Expression token.

    StrEnum provides automatic string conversion: str(TokenType.TEXT) == "text"

    START_OF_LINE and END_OF_LINE are never produced as real tokens. The parser
    synthesizes them for positions before the first and past the last token.
    """

    START_OF_LINE = "start-of-line"
    """Virtual boundary before the first token"""

    END_OF_LINE = "end-of-line"
    """Virtual boundary after the last token"""

    WHITE_SPACE = "white-space"
    """Run of whitespace characters"""

    BEGIN_OPTIONAL = "begin-optional"
    """Opening parenthesis: ("""

    END_OPTIONAL = "end-optional"
    """Closing parenthesis: )"""

    BEGIN_PARAMETER = "begin-parameter"
    """Opening brace: {"""

    END_PARAMETER = "end-parameter"
    """Closing brace: }"""

    ALTERNATION = "alternation"
    """Alternative separator: /"""

    TEXT = "text"
    """Run of literal (possibly escaped) characters"""


class NodeType(StrEnum):
    """Kind of AST node.

    StrEnum provides automatic string conversion: str(NodeType.OPTIONAL) == "optional"
    """

    EXPRESSION = "expression"
    """Root node spanning the whole expression"""

    OPTIONAL = "optional"
    """Optional text: (s)"""

    PARAMETER = "parameter"
    """Parameter reference: {int}"""

    ALTERNATION = "alternation"
    """Boundary-delimited alternatives: cat/dog"""

    ALTERNATIVE = "alternative"
    """One branch of an alternation"""

    TEXT = "text"
    """Literal text"""


__all__ = [
    "NodeType",
    "TokenType",
]
