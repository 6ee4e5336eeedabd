"""
lintface Tree-sitter engine package.

This package provides a language-agnostic lint engine built on Tree-sitter:
one syntax tree is walked per invocation and every rule of the language's
profile is applied at every node.
"""

from .types import (
    Diagnostic, RuleMeta, Rule, NodeContext, LanguageProfile, LanguageAdapter,
    SyntaxNode, to_position, diagnostic_at
)

from .errors import (
    LintError, UnsupportedLanguageError, ParserConfigurationError, ParseFailureError
)

from .walker import walk, check_syntax_errors

from .registry import (
    Registry, LanguageBinding, SupportedLanguage, get_registry, resolve,
    list_supported_languages, create_default_registry
)

from .linter import lint, Linter
from .metrics import LintMetrics
from .config import EngineConfig, load_config, find_config_file

__all__ = [
    # Types
    "Diagnostic", "RuleMeta", "Rule", "NodeContext", "LanguageProfile",
    "LanguageAdapter", "SyntaxNode", "to_position", "diagnostic_at",

    # Errors
    "LintError", "UnsupportedLanguageError", "ParserConfigurationError", "ParseFailureError",

    # Walker
    "walk", "check_syntax_errors",

    # Registry
    "Registry", "LanguageBinding", "SupportedLanguage", "get_registry", "resolve",
    "list_supported_languages", "create_default_registry",

    # Entry point
    "lint", "Linter", "LintMetrics",

    # Config
    "EngineConfig", "load_config", "find_config_file",
]
