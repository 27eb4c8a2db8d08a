"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from cucumberexpr.constants import ESCAPE_CHARACTER, TOKEN_PURPOSES, TOKEN_SYMBOLS
from cucumberexpr.enums import TokenType

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def missing_end_token(
        expression: str | None,
        begin_type: TokenType,
        end_type: TokenType,
        start: int,
        end: int,
    ) -> Diagnostic:
        """Opening bracket without a matching closing bracket.

        Args:
            expression: The expression being parsed
            begin_type: Token type of the opening bracket
            end_type: Token type of the expected closing bracket
            start: Start offset of the opening bracket
            end: End offset of the opening bracket

        Returns:
            Diagnostic for MISSING_END_TOKEN
        """
        begin_symbol = TOKEN_SYMBOLS.get(begin_type, str(begin_type))
        end_symbol = TOKEN_SYMBOLS.get(end_type, str(end_type))
        purpose = TOKEN_PURPOSES.get(begin_type, "it")
        msg = f"The '{begin_symbol}' does not have a matching '{end_symbol}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_END_TOKEN,
            message=msg,
            span=SourceSpan.at(start, end),
            hint=(
                f"If you did not intend to use {purpose} you can use "
                f"'{ESCAPE_CHARACTER}{begin_symbol}' to escape {purpose}"
            ),
            expression=expression,
        )

    @staticmethod
    def cannot_escape(expression: str, position: int) -> Diagnostic:
        """Escape character applied to a character that cannot be escaped.

        Args:
            expression: The expression being tokenized
            position: Offset of the character following the escape

        Returns:
            Diagnostic for CANNOT_ESCAPE
        """
        msg = (
            "Only the characters '{', '}', '(', ')', '\\', '/' and whitespace "
            "can be escaped"
        )
        return Diagnostic(
            code=DiagnosticCode.CANNOT_ESCAPE,
            message=msg,
            span=SourceSpan.at(position, position + 1),
            hint="If you did mean to use an '\\' you can use '\\\\' to escape it",
            expression=expression,
        )

    @staticmethod
    def end_of_line_escaped(expression: str) -> Diagnostic:
        """Expression ends with an unpaired escape character.

        Args:
            expression: The expression being tokenized

        Returns:
            Diagnostic for END_OF_LINE_ESCAPED
        """
        return Diagnostic(
            code=DiagnosticCode.END_OF_LINE_ESCAPED,
            message="The end of line can not be escaped",
            span=SourceSpan.at(len(expression)),
            hint="You can use '\\\\' to escape the '\\'",
            expression=expression,
        )

    @staticmethod
    def expression_too_long(length: int, max_length: int) -> Diagnostic:
        """Expression exceeds the configured length limit.

        Args:
            length: Actual expression length in characters
            max_length: Configured maximum

        Returns:
            Diagnostic for EXPRESSION_TOO_LONG
        """
        msg = f"Expression length ({length:,} characters) exceeds maximum ({max_length:,})"
        return Diagnostic(
            code=DiagnosticCode.EXPRESSION_TOO_LONG,
            message=msg,
            hint=(
                "Configure max_expression_length in CucumberExpressionParser "
                "constructor to increase limit"
            ),
        )

    @staticmethod
    def no_eligible_parser(position: int) -> Diagnostic:
        """No parser in a rule accepted the token at a position.

        Args:
            position: Token index at which every parser declined

        Returns:
            Diagnostic for NO_ELIGIBLE_PARSER
        """
        return Diagnostic(
            code=DiagnosticCode.NO_ELIGIBLE_PARSER,
            message=f"No eligible parsers for token at index {position}",
            hint="Every rule's parser list must end with a parser that always accepts",
        )

    @staticmethod
    def unconsumed_tokens(expression: str | None, consumed: int, total: int) -> Diagnostic:
        """Expression rule finished without consuming every token.

        Args:
            expression: The expression being parsed
            consumed: Number of token slots consumed
            total: Number of token slots available

        Returns:
            Diagnostic for UNCONSUMED_TOKENS
        """
        return Diagnostic(
            code=DiagnosticCode.UNCONSUMED_TOKENS,
            message=(
                f"Could not parse expression: consumed {consumed} "
                f"of {total} token slots"
            ),
            hint="The tokenizer produced a token type the grammar does not handle",
            expression=expression,
        )
