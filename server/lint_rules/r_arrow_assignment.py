"""
Rule to prefer ``=`` over ``<-`` for assignment in R code.
"""

from typing import Iterator

from lint_engine.types import Diagnostic, NodeContext, RuleMeta, diagnostic_at


class RuleRArrowAssignment:
    """Rule to flag the left-arrow assignment operator token."""

    meta = RuleMeta(
        id="r.arrow_assignment",
        description="Use '=' for assignment instead of '<-'.",
        langs=("r",),
        category="style",
    )

    def visit(self, ctx: NodeContext) -> Iterator[Diagnostic]:
        # The operator is an anonymous token node whose kind is its own text
        if ctx.node.type == "<-":
            yield diagnostic_at(ctx.node, "Use '=' for assignment instead of '<-'")
