"""
Tree-sitter node helpers.

Small, allocation-light helpers over the ``SyntaxNode`` protocol. They work
on raw ``tree_sitter.Node`` objects as well as on the fake nodes used in
tests, so the walker and rules never depend on the binding directly.
"""

from typing import Iterator, List, Optional, Tuple

from .types import Lineage, LineCol, SyntaxNode, to_position


def encode_source(source: str) -> bytes:
    """Encode source text to the UTF-8 bytes handed to the parser.

    Lone surrogates are valid in a Python ``str`` (JSON ``"\\ud800"`` decodes
    to one) but not in strict UTF-8. They are passed through as their
    three-byte form so that parsing never fails on them; ``node_text`` turns
    such slices into ``""``.
    """
    return source.encode("utf-8", "surrogatepass")


def node_text(node: SyntaxNode, source_bytes: bytes) -> str:
    """Get the exact source slice covered by a node.

    Returns an empty string when the slice is not valid UTF-8 (a node
    boundary can split a multi-byte character inside an error region).
    """
    try:
        return source_bytes[node.start_byte:node.end_byte].decode("utf-8")
    except UnicodeDecodeError:
        return ""


def node_position(node: SyntaxNode) -> LineCol:
    """Get the node's 1-based (line, column) start position."""
    return to_position(node.start_point)


def first_child_of_type(node: SyntaxNode, kind: str) -> Optional[SyntaxNode]:
    """Return the first direct child whose type is ``kind``."""
    for child in node.children:
        if child.type == kind:
            return child
    return None


def iter_lineage(lineage: Lineage) -> Iterator[SyntaxNode]:
    """Iterate a lineage chain outwards, parent first, root last."""
    while lineage is not None:
        node, lineage = lineage
        yield node


def iter_preorder(root: SyntaxNode) -> Iterator[Tuple[SyntaxNode, Lineage]]:
    """Walk a tree depth-first, pre-order, left to right.

    Yields ``(node, lineage)`` where ``lineage`` is the chain of enclosing
    nodes, ``(parent, (grandparent, (... None)))``. Each chain link is built
    once per parent and shared by its children, so the walk stays linear in
    tree size. An explicit stack keeps nesting depth bounded by memory rather
    than by the interpreter's recursion limit.
    """
    stack: List[Tuple[SyntaxNode, Lineage]] = [(root, None)]

    while stack:
        node, lineage = stack.pop()
        yield node, lineage

        children = node.children
        if children:
            link = (node, lineage)
            # Reverse so the leftmost child is popped first
            for child in reversed(children):
                stack.append((child, link))
