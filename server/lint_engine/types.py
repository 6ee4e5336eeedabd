"""
Core types for the lintface Tree-sitter engine.

This module provides the shared dataclasses and protocols used across the
walker, adapters, registry and rules.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Optional, Protocol, Sequence, Tuple
from abc import ABC, abstractmethod


# Type aliases for clarity
Point = Tuple[int, int]  # (row, column) 0-based, as reported by the parser
LineCol = Tuple[int, int]  # (line, column) 1-based, as reported to callers
# Enclosing-node chain built by the walker: (parent, (grandparent, (... None)))
Lineage = Optional[Tuple[Any, Any]]


def to_position(point: Point) -> LineCol:
    """Convert a parser-native 0-based (row, column) to a 1-based (line, column)."""
    row, column = point[0], point[1]
    return (row + 1, column + 1)


@dataclass(frozen=True)
class Diagnostic:
    """A diagnostic reported by the universal detector or by a rule."""
    line: int
    column: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"line": self.line, "column": self.column, "message": self.message}


def diagnostic_at(node: "SyntaxNode", message: str) -> Diagnostic:
    """Build a diagnostic anchored at the node's start position."""
    line, column = to_position(node.start_point)
    return Diagnostic(line=line, column=column, message=message)


class SyntaxNode(Protocol):
    """Read-only view of a concrete syntax tree node.

    ``tree_sitter.Node`` satisfies this protocol as-is. ``type`` is the
    grammar's kind tag (e.g. "identifier", "call", "<-").
    """
    type: str
    start_byte: int
    end_byte: int
    start_point: Point
    is_error: bool
    is_missing: bool

    @property
    def children(self) -> Sequence["SyntaxNode"]:
        ...

    def child_by_field_name(self, name: str) -> Optional["SyntaxNode"]:
        ...


@dataclass(frozen=True)
class RuleMeta:
    """Metadata about a rule.

    Attributes:
        id: Unique rule identifier (e.g., "java.constructor_name")
        description: Human-readable description
        langs: Languages the rule is written for
        category: Rule category for grouping ("naming", "style", ...)
    """
    id: str
    description: str = ""
    langs: Tuple[str, ...] = ()
    category: str = "style"


class Rule(Protocol):
    """Protocol for all rules in the engine.

    Rules are evaluated at every visited node. They must be stateless and
    only ever add diagnostics.
    """
    meta: RuleMeta

    def visit(self, ctx: "NodeContext") -> Iterable[Diagnostic]:
        """Return the diagnostics this rule reports for ``ctx.node``."""
        ...


@dataclass(frozen=True)
class LanguageProfile:
    """Ordered rules plus lookup tables bound to one language."""
    language_id: str
    rules: Tuple[Rule, ...] = ()
    reserved_words: FrozenSet[str] = frozenset()

    @property
    def rule_ids(self) -> Tuple[str, ...]:
        return tuple(rule.meta.id for rule in self.rules)


@dataclass
class NodeContext:
    """Context passed to rules for a single node visit.

    ``lineage`` is the enclosing-node chain supplied by the walker, so rules
    never need parent back-references on the node itself.
    """
    node: SyntaxNode
    source: str
    source_bytes: bytes
    lineage: Lineage = None
    profile: Optional[LanguageProfile] = None

    @property
    def parent(self) -> Optional[SyntaxNode]:
        return self.lineage[0] if self.lineage is not None else None

    @property
    def ancestors(self) -> Tuple[SyntaxNode, ...]:
        """Enclosing nodes ordered from the root down to the parent."""
        from .tree_sitter_compat import iter_lineage
        return tuple(reversed(list(iter_lineage(self.lineage))))

    def text(self, node: Optional[SyntaxNode] = None) -> str:
        """Source text covered by ``node`` (defaults to the visited node)."""
        from .tree_sitter_compat import node_text
        return node_text(node if node is not None else self.node, self.source_bytes)

    def enclosing(self, kind: str, stop_at: Iterable[str] = ()) -> Optional[SyntaxNode]:
        """Find the nearest ancestor of ``kind``.

        The search walks outwards from the parent. If an ancestor whose kind
        is in ``stop_at`` is reached first, the search gives up and returns None.
        """
        from .tree_sitter_compat import iter_lineage

        stops = frozenset(stop_at)
        for ancestor in iter_lineage(self.lineage):
            if ancestor.type in stops:
                return None
            if ancestor.type == kind:
                return ancestor
        return None

    def first_child(self, node: SyntaxNode, kind: str) -> Optional[SyntaxNode]:
        from .tree_sitter_compat import first_child_of_type
        return first_child_of_type(node, kind)


class LanguageAdapter(ABC):
    """Abstract base class for language adapters.

    An adapter owns the binding between a language id and its Tree-sitter
    grammar. The compiled grammar may be cached; parsers are not shared.
    """

    def __init__(self):
        self._language = None

    @property
    @abstractmethod
    def language_id(self) -> str:
        """Return the language identifier (e.g., 'python', 'java', 'r')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> Tuple[str, ...]:
        """Return supported file extensions (e.g., ('.py',), ('.R', '.r'))."""
        pass

    @abstractmethod
    def load_language(self) -> Any:
        """Return the raw language capsule exported by the grammar package."""
        pass

    def get_language(self) -> Any:
        """Get or build the ``tree_sitter.Language`` for this adapter."""
        if self._language is None:
            from .errors import ParserConfigurationError
            try:
                import tree_sitter
                self._language = tree_sitter.Language(self.load_language())
            except ImportError as e:
                raise ParserConfigurationError(self.language_id, f"grammar not installed: {e}") from e
            except (TypeError, ValueError) as e:
                raise ParserConfigurationError(self.language_id, str(e)) from e
        return self._language

    def create_parser(self) -> Any:
        """Build a fresh parser bound to this adapter's grammar."""
        import tree_sitter
        from .errors import ParserConfigurationError

        language = self.get_language()
        try:
            return tree_sitter.Parser(language)
        except ValueError as e:
            raise ParserConfigurationError(self.language_id, str(e)) from e

    def parse(self, text: str) -> Any:
        """Parse text and return a Tree-sitter tree.

        Raises:
            ParserConfigurationError: the grammar could not be bound
            ParseFailureError: the parser produced no tree at all
        """
        from .errors import ParseFailureError
        from .tree_sitter_compat import encode_source

        parser = self.create_parser()
        tree = parser.parse(encode_source(text))
        if tree is None:
            raise ParseFailureError(self.language_id)
        return tree
