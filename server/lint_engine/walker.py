"""
Tree walker for the lintface engine.

Visits every node of a syntax tree once, depth-first and pre-order, running
the universal error/missing detector and then each rule of the active
language profile.
"""

import logging
from typing import List

from .types import Diagnostic, LanguageProfile, NodeContext, SyntaxNode, diagnostic_at
from .tree_sitter_compat import encode_source, iter_preorder, node_text

logger = logging.getLogger(__name__)


def check_syntax_errors(node: SyntaxNode, source_bytes: bytes) -> List[Diagnostic]:
    """Report parse error regions and parser-inserted missing tokens.

    Applies to every language. An error node is never also reported as
    missing.
    """
    if node.is_error:
        error_text = node_text(node, source_bytes)
        diagnostic = diagnostic_at(node, f"Syntax error near '{error_text}'")
        logger.debug("Error node %s at %d:%d", node.type, diagnostic.line, diagnostic.column)
        return [diagnostic]
    if node.is_missing:
        diagnostic = diagnostic_at(node, f"Missing {node.type}")
        logger.debug("Missing node %s at %d:%d", node.type, diagnostic.line, diagnostic.column)
        return [diagnostic]
    return []


def walk(root: SyntaxNode, source: str, profile: LanguageProfile) -> List[Diagnostic]:
    """
    Walk a syntax tree and collect diagnostics in visitation order.

    At each node the universal detector runs first, then every rule of
    ``profile`` in declared order, then the children left to right. Error
    recovery subtrees are walked like any other subtree. Diagnostics are
    never deduplicated or sorted.

    Args:
        root: Root node of the tree produced for ``source``
        source: The full source text that was parsed
        profile: Rules and lookup tables of the language being linted

    Returns:
        Diagnostics in the order they were produced
    """
    source_bytes = encode_source(source)
    diagnostics: List[Diagnostic] = []
    visited = 0

    for node, lineage in iter_preorder(root):
        visited += 1
        diagnostics.extend(check_syntax_errors(node, source_bytes))

        if profile.rules:
            ctx = NodeContext(
                node=node,
                source=source,
                source_bytes=source_bytes,
                lineage=lineage,
                profile=profile,
            )
            for rule in profile.rules:
                diagnostics.extend(rule.visit(ctx))

    logger.debug(
        "Walked %d nodes for %s, %d diagnostics",
        visited, profile.language_id, len(diagnostics),
    )
    return diagnostics
