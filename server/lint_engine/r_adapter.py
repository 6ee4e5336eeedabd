"""
R language adapter for tree-sitter.
"""
from typing import Any, Tuple

from .types import LanguageAdapter


class RAdapter(LanguageAdapter):
    """Tree-sitter adapter for R language."""

    @property
    def language_id(self) -> str:
        """Return the language identifier."""
        return "r"

    @property
    def file_extensions(self) -> Tuple[str, ...]:
        """Return supported file extensions."""
        return (".R", ".r")

    def load_language(self) -> Any:
        from tree_sitter_r import language
        return language()


# Default adapter instance
default_r_adapter = RAdapter()
