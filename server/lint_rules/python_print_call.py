"""
Rule to discourage ``print`` calls in Python code.
"""

from typing import Iterator

from lint_engine.types import Diagnostic, NodeContext, RuleMeta, diagnostic_at


class RulePythonPrintCall:
    """Rule to flag calls whose callee is exactly ``print``."""

    meta = RuleMeta(
        id="python.print_call",
        description="Use of print statements is discouraged; prefer logging.",
        langs=("python",),
        category="style",
    )

    def visit(self, ctx: NodeContext) -> Iterator[Diagnostic]:
        if ctx.node.type != "call":
            return

        function_node = ctx.node.child_by_field_name("function")
        if function_node is not None and ctx.text(function_node) == "print":
            yield diagnostic_at(ctx.node, "Use of print statements is discouraged")
