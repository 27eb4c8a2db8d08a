"""AST normalization and verification utilities for property-based tests.

Provides shared utilities for comparing ASTs semantically, stripping
source offsets and merging adjacent text nodes.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from cucumberexpr.enums import NodeType
from cucumberexpr.syntax.ast import Node


def iter_nodes(node: Node, parent: Node | None = None) -> Iterator[tuple[Node, Node | None]]:
    """Yield (node, parent) pairs in pre-order."""
    yield node, parent
    for child in node.children:
        yield from iter_nodes(child, node)


def normalize_ast(node: Node) -> Any:
    """Normalize an AST for semantic comparison.

    Drops offsets and merges adjacent text children into one text entry, so
    "a" "b" and "ab" compare equal.

    Returns:
        Nested tuples of (kind, text, children)
    """
    children: list[Any] = []
    for child in node.children:
        normalized = normalize_ast(child)
        if (
            child.kind == NodeType.TEXT
            and children
            and children[-1][0] == NodeType.TEXT.value
        ):
            children[-1] = (NodeType.TEXT.value, children[-1][1] + child.text, ())
        else:
            children.append(normalized)
    return (node.kind.value, node.text, tuple(children))


def shift_node(node: Node, offset: int) -> Node:
    """Translate every offset in node by -offset."""
    return Node(
        node.kind,
        node.start - offset,
        node.end - offset,
        node.text,
        tuple(shift_node(child, offset) for child in node.children),
    )


def verify_spans(node: Node, source: str) -> None:
    """Verify span bounds, containment and sibling ordering.

    Raises:
        AssertionError: If a span is out of bounds, escapes its parent or
            overlaps a preceding sibling
    """
    assert 0 <= node.start <= node.end <= len(source), (
        f"Span out of bounds: {node.kind} [{node.start}, {node.end}) in {len(source)}"
    )
    last_end = node.start
    for child in node.children:
        assert node.span.contains(child.span), (
            f"{child.kind} [{child.start}, {child.end}) escapes "
            f"{node.kind} [{node.start}, {node.end})"
        )
        assert child.start >= last_end, f"Overlapping spans: {last_end} -> {child.start}"
        last_end = child.end
        verify_spans(child, source)


def verify_structure(root: Node) -> None:
    """Verify node kinds appear only where the grammar allows them.

    Raises:
        AssertionError: On a misplaced node kind
    """
    assert root.kind == NodeType.EXPRESSION
    for node, parent in iter_nodes(root):
        if node.kind == NodeType.TEXT:
            assert not node.children
        else:
            assert node.text == ""

        if node.kind == NodeType.EXPRESSION:
            assert parent is None
        elif node.kind == NodeType.ALTERNATIVE:
            assert parent is not None
            assert parent.kind == NodeType.ALTERNATION
        elif node.kind == NodeType.ALTERNATION:
            assert len(node.children) >= 2
            assert all(child.kind == NodeType.ALTERNATIVE for child in node.children)
        elif node.kind == NodeType.PARAMETER:
            assert all(child.kind == NodeType.TEXT for child in node.children)
        elif node.kind == NodeType.OPTIONAL:
            assert all(
                child.kind in (NodeType.TEXT, NodeType.PARAMETER) for child in node.children
            )
