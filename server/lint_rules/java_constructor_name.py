"""
Rule to detect Java constructors whose name does not match their class.

The enclosing class is found by walking the lineage outwards. Enum
constructors are skipped: if an ``enum_declaration`` is reached before a
``class_declaration`` the rule stays silent.
"""

from typing import Iterator

from lint_engine.types import Diagnostic, NodeContext, RuleMeta, diagnostic_at


class RuleJavaConstructorName:
    """Rule to detect constructor names that differ from the class name."""

    meta = RuleMeta(
        id="java.constructor_name",
        description="Constructor name must match the name of the enclosing class.",
        langs=("java",),
        category="naming",
    )

    def visit(self, ctx: NodeContext) -> Iterator[Diagnostic]:
        node = ctx.node
        if node.type != "constructor_declaration":
            return

        class_node = ctx.enclosing("class_declaration", stop_at=("enum_declaration",))
        if class_node is None:
            return

        class_ident = ctx.first_child(class_node, "identifier")
        class_name = ctx.text(class_ident) if class_ident is not None else ""
        if not class_name:
            return

        ctor_ident = ctx.first_child(node, "identifier")
        constructor_name = ctx.text(ctor_ident) if ctor_ident is not None else ""

        if constructor_name != class_name:
            yield diagnostic_at(
                node,
                f"Invalid constructor name '{constructor_name}'. "
                f"Constructor name must match the class name '{class_name}'",
            )
