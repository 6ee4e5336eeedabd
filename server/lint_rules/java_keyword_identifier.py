"""
Rule to detect Java reserved words used as identifiers.

Tree-sitter's error recovery sometimes accepts a keyword in identifier
position (``int public = 1;``). This rule reports every such identifier,
including ones inside error regions.
"""

from typing import Iterator

from lint_engine.types import Diagnostic, NodeContext, RuleMeta, diagnostic_at


class RuleJavaKeywordIdentifier:
    """Rule to detect reserved words used as identifiers."""

    meta = RuleMeta(
        id="java.keyword_identifier",
        description="Reserved words cannot be used as identifiers.",
        langs=("java",),
        category="naming",
    )

    def visit(self, ctx: NodeContext) -> Iterator[Diagnostic]:
        if ctx.node.type != "identifier":
            return

        reserved = ctx.profile.reserved_words if ctx.profile else frozenset()
        identifier = ctx.text()
        if identifier in reserved:
            yield diagnostic_at(
                ctx.node,
                f"'{identifier}' is a keyword and cannot be used as an identifier",
            )
