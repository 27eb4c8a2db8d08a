"""Cucumber Expression AST (Abstract Syntax Tree) node definitions.

A single node type discriminated by ``kind`` covers the whole grammar:

    expression  := ( alternation | optional | parameter | text )*
    alternation := alternative ( '/' alternative )+
    alternative := ( optional | parameter | text )*
    optional    := '(' ( parameter | text )* ')'
    parameter   := '{' text* '}'

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from cucumberexpr.enums import NodeType

__all__ = [
    "Node",
    "Span",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "I have {int} cukes"
        Parameter span: Span(start=7, end=12)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def contains(self, other: "Span") -> bool:
        """Check if other lies within this span."""
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True, slots=True)
class Node:
    """AST node.

    Text nodes carry literal (unescaped) text and no children. All other
    kinds carry children and empty text.

    Attributes:
        kind: Node type
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
        text: Literal text (text nodes only)
        children: Child nodes in source order

    Example:
        Source: "(s)"
        Node(NodeType.OPTIONAL, 0, 3, children=(Node(NodeType.TEXT, 1, 2, "s"),))
    """

    kind: NodeType
    start: int
    end: int
    text: str = ""
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        """Validate node invariants."""
        if self.start < 0:
            msg = f"Node start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Node end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.text and self.children:
            msg = f"{self.kind} node cannot carry both text and children"
            raise ValueError(msg)

    @property
    def span(self) -> Span:
        """Source span of this node."""
        return Span(start=self.start, end=self.end)
