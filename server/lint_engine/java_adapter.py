"""
Java language adapter for tree-sitter.
"""
from typing import Any, Tuple

from .types import LanguageAdapter


class JavaAdapter(LanguageAdapter):
    """Tree-sitter adapter for Java language."""

    @property
    def language_id(self) -> str:
        """Return the language identifier."""
        return "java"

    @property
    def file_extensions(self) -> Tuple[str, ...]:
        """Return supported file extensions."""
        return (".java",)

    def load_language(self) -> Any:
        from tree_sitter_java import language
        return language()


# Default adapter instance
default_java_adapter = JavaAdapter()
