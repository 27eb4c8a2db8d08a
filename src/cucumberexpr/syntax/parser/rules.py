"""Grammar rules for the Cucumber Expression parser.

Grammar:
    expression  := ( alternation | optional | parameter | text )*
    alternation := (?<=boundary) alternative* ( '/' alternative* )+ (?=boundary)
    boundary    := whitespace | ^ | $
    alternative := optional | parameter | text
    optional    := '(' ( parameter | text )* ')'
    parameter   := '{' text* '}'
    text        := token

Every parser takes a ParseContext and a token position and returns either
``ParseResult(node, consumed)`` or ``None`` when it does not apply at that
position. Declining is how the grammar backtracks: the driver tries the next
parser in priority order. Only a missing closing bracket is a syntax error.

All grammar rules are co-located in a single module because the bracketed
rules are built from each other (expression -> alternation -> optional ->
parameter -> text).
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from cucumberexpr.diagnostics import ErrorTemplate, ExpressionSyntaxError, GrammarDefectError
from cucumberexpr.enums import NodeType, TokenType
from cucumberexpr.syntax.ast import Node
from cucumberexpr.syntax.cursor import ParseResult, looking_at, looking_at_any, token_at
from cucumberexpr.syntax.tokens import Token

__all__ = [
    "ParseContext",
    "Parser",
    "parse_alternation",
    "parse_alternative_separator",
    "parse_between",
    "parse_expression",
    "parse_optional",
    "parse_parameter",
    "parse_text",
    "parse_token",
    "parse_tokens_until",
    "split_alternatives",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces shared parser state with explicit parameter passing, so one
    context serves exactly one parse and concurrent parses share nothing.

    Attributes:
        tokens: Real tokens of the expression (no boundary tokens)
        expression: Source text, used to render diagnostics (None when
            parsing a token sequence without source)
    """

    tokens: tuple[Token, ...]
    expression: str | None = None


type Parser = Callable[[ParseContext, int], ParseResult[Node] | None]


# =============================================================================
# Driver
# =============================================================================


def parse_token(parsers: Sequence[Parser], context: ParseContext, position: int) -> ParseResult[Node]:
    """Parse one construct at position with the first parser that applies.

    Args:
        parsers: Parsers in priority order
        context: Parse context
        position: Token position

    Returns:
        Result of the first parser that consumed at least one token

    Raises:
        GrammarDefectError: If every parser declined. The last parser of each
            rule accepts any token, so this indicates a broken rule table.
    """
    for parser in parsers:
        result = parser(context, position)
        if result is not None and result.consumed > 0:
            return result
    raise GrammarDefectError(ErrorTemplate.no_eligible_parser(position))


def parse_tokens_until(
    parsers: Sequence[Parser],
    context: ParseContext,
    start: int,
    *stop_types: TokenType,
) -> tuple[int, list[Node]]:
    """Parse constructs from start until a stop token or the end of the tokens.

    The stop token itself is not consumed.

    Returns:
        (consumed, nodes) tuple
    """
    tokens = context.tokens
    nodes: list[Node] = []
    position = start
    while position < len(tokens) and not looking_at_any(tokens, position, *stop_types):
        result = parse_token(parsers, context, position)
        nodes.append(result.value)
        position += result.consumed
    return position - start, nodes


# =============================================================================
# Leaf parsers
# =============================================================================


def parse_text(context: ParseContext, position: int) -> ParseResult[Node] | None:
    """Parse any single token as literal text.

    Only invoked after every higher-priority parser declined, so it never
    declines itself.
    """
    token = context.tokens[position]
    return ParseResult(Node(NodeType.TEXT, token.start, token.end, token.text), 1)


def parse_alternative_separator(context: ParseContext, position: int) -> ParseResult[Node] | None:
    """Parse a ``/`` into a separator marker.

    The marker is an ALTERNATIVE node spanning the separator. It only lives
    until split_alternatives() turns it into boundaries.
    """
    if not looking_at(context.tokens, position, TokenType.ALTERNATION):
        return None
    token = context.tokens[position]
    return ParseResult(Node(NodeType.ALTERNATIVE, token.start, token.end), 1)


# =============================================================================
# Bracketed constructs
# =============================================================================


def parse_between(
    node_type: NodeType,
    begin_type: TokenType,
    end_type: TokenType,
    parsers: Sequence[Parser],
) -> Parser:
    """Build a parser for a construct delimited by begin and end tokens.

    Args:
        node_type: Kind of node to produce
        begin_type: Opening token type
        end_type: Closing token type
        parsers: Parsers for the content, in priority order

    Returns:
        Parser that declines unless at begin_type, parses content until
        end_type, consumes end_type and emits a node spanning both.
        Raises ExpressionSyntaxError anchored at the opening token when the
        tokens run out before end_type.
    """
    parsers = tuple(parsers)

    def parse_construct(context: ParseContext, position: int) -> ParseResult[Node] | None:
        tokens = context.tokens
        if not looking_at(tokens, position, begin_type):
            return None

        begin = token_at(tokens, position)
        consumed, children = parse_tokens_until(parsers, context, position + 1, end_type)
        end_position = position + 1 + consumed

        if not looking_at(tokens, end_position, end_type):
            raise ExpressionSyntaxError(
                ErrorTemplate.missing_end_token(
                    context.expression, begin_type, end_type, begin.start, begin.end
                )
            )

        end = token_at(tokens, end_position)
        node = Node(node_type, begin.start, end.end, children=tuple(children))
        return ParseResult(node, end_position + 1 - position)

    parse_construct.__name__ = parse_construct.__qualname__ = f"parse_{node_type}"
    return parse_construct


parse_parameter = parse_between(
    NodeType.PARAMETER,
    TokenType.BEGIN_PARAMETER,
    TokenType.END_PARAMETER,
    (parse_text,),
)

parse_optional = parse_between(
    NodeType.OPTIONAL,
    TokenType.BEGIN_OPTIONAL,
    TokenType.END_OPTIONAL,
    (parse_parameter, parse_text),
)


# =============================================================================
# Alternation
# =============================================================================

_ALTERNATIVE_PARSERS: tuple[Parser, ...] = (
    parse_alternative_separator,
    parse_optional,
    parse_parameter,
    parse_text,
)


def split_alternatives(start: int, end: int, items: Sequence[Node]) -> tuple[Node, ...]:
    """Group a flat alternation run into spanned ALTERNATIVE nodes.

    Args:
        start: Start offset of the alternation
        end: End offset of the alternation
        items: Content nodes interleaved with separator markers

    Returns:
        One ALTERNATIVE node per group. The first group starts at start, the
        last ends at end, and every other boundary is the edge of a
        separator. Separator markers are dropped.

    Example:
        "a/b" -> alternative(0, 1)[a], alternative(2, 3)[b]
    """
    groups: list[list[Node]] = [[]]
    edges = [start]
    for item in items:
        if item.kind == NodeType.ALTERNATIVE:
            edges.extend((item.start, item.end))
            groups.append([])
        else:
            groups[-1].append(item)
    edges.append(end)

    # edges holds (start, end) pairs, one per group
    return tuple(
        Node(NodeType.ALTERNATIVE, edges[2 * i], edges[2 * i + 1], children=tuple(group))
        for i, group in enumerate(groups)
    )


def parse_alternation(context: ParseContext, position: int) -> ParseResult[Node] | None:
    """Parse boundary-delimited alternatives: ``cat/dog``, ``(a)/b/{c}``.

    Lookbehind: the previous token must be START_OF_LINE or whitespace.
    Lookahead: the run ends at whitespace or END_OF_LINE, which is not
    consumed and not included in the span.

    Declines when not preceded by a boundary or when the run contains no
    separator.
    """
    tokens = context.tokens
    if not looking_at_any(tokens, position - 1, TokenType.START_OF_LINE, TokenType.WHITE_SPACE):
        return None

    consumed, items = parse_tokens_until(
        _ALTERNATIVE_PARSERS,
        context,
        position,
        TokenType.WHITE_SPACE,
        TokenType.END_OF_LINE,
    )
    if not any(item.kind == NodeType.ALTERNATIVE for item in items):
        return None

    start = token_at(tokens, position).start
    end = token_at(tokens, position + consumed).start
    node = Node(NodeType.ALTERNATION, start, end, children=split_alternatives(start, end, items))
    return ParseResult(node, consumed)


# =============================================================================
# Expression
# =============================================================================

parse_expression = parse_between(
    NodeType.EXPRESSION,
    TokenType.START_OF_LINE,
    TokenType.END_OF_LINE,
    (parse_alternation, parse_optional, parse_parameter, parse_text),
)
