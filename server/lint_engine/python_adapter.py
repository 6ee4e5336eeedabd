"""
Python language adapter for tree-sitter.
"""
from typing import Any, Tuple

from .types import LanguageAdapter


class PythonAdapter(LanguageAdapter):
    """Tree-sitter adapter for Python language."""

    @property
    def language_id(self) -> str:
        """Return the language identifier."""
        return "python"

    @property
    def file_extensions(self) -> Tuple[str, ...]:
        """Return supported file extensions."""
        return (".py", ".pyi")

    def load_language(self) -> Any:
        from tree_sitter_python import language
        return language()


# Default adapter instance
default_python_adapter = PythonAdapter()
