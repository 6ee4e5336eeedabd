"""
Registry for language bindings.

This module maps language ids to the adapter and profile used to lint them.
The supported set is closed (``SupportedLanguage``); anything else resolves
to ``UnsupportedLanguageError`` before a parser is ever built.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .errors import UnsupportedLanguageError
from .types import LanguageAdapter, LanguageProfile

logger = logging.getLogger(__name__)


class SupportedLanguage(str, Enum):
    """Languages with a built-in binding."""
    JAVA = "java"
    PYTHON = "python"
    R = "r"


@dataclass(frozen=True)
class LanguageBinding:
    """An adapter and a profile bound to one language."""
    language: str
    adapter: LanguageAdapter
    profile: LanguageProfile


class Registry:
    """Central registry for language bindings."""

    def __init__(self):
        self._bindings: Dict[str, LanguageBinding] = {}

    def register(self, binding: LanguageBinding) -> None:
        """Register a binding. Silently skips if the language is already bound."""
        if binding.language in self._bindings:
            return
        self._bindings[binding.language] = binding

    def get(self, language: str) -> Optional[LanguageBinding]:
        """Get the binding for a language, or None."""
        return self._bindings.get(language)

    def resolve(self, language: str) -> LanguageBinding:
        """
        Resolve a language id to its binding.

        Raises:
            UnsupportedLanguageError: the id has no registered binding
        """
        binding = self._bindings.get(language)
        if binding is None:
            raise UnsupportedLanguageError(language)
        return binding

    def list_supported_languages(self) -> List[str]:
        """List all registered languages."""
        return list(self._bindings.keys())

    def clear(self) -> None:
        """Clear all registered bindings (mainly for testing)."""
        self._bindings.clear()


def default_bindings() -> List[LanguageBinding]:
    """Build the bindings for every ``SupportedLanguage``."""
    from .java_adapter import default_java_adapter
    from .python_adapter import default_python_adapter
    from .r_adapter import default_r_adapter
    from .profiles import build_profile

    adapters = {
        SupportedLanguage.JAVA: default_java_adapter,
        SupportedLanguage.PYTHON: default_python_adapter,
        SupportedLanguage.R: default_r_adapter,
    }
    return [
        LanguageBinding(language=lang.value, adapter=adapter, profile=build_profile(lang.value))
        for lang, adapter in adapters.items()
    ]


def create_default_registry() -> Registry:
    """Create a registry populated with the built-in bindings."""
    registry = Registry()
    for binding in default_bindings():
        registry.register(binding)
    return registry


# Global registry instance, populated on first use
_global_registry: Optional[Registry] = None
_registry_lock = threading.Lock()


def get_registry() -> Registry:
    """Get the global registry instance."""
    global _global_registry
    if _global_registry is None:
        with _registry_lock:
            if _global_registry is None:
                _global_registry = create_default_registry()
                logger.info(
                    "Registered languages: %s",
                    ", ".join(_global_registry.list_supported_languages()),
                )
    return _global_registry


def resolve(language: str) -> LanguageBinding:
    """Resolve a language id against the global registry."""
    return get_registry().resolve(language)


def list_supported_languages() -> List[str]:
    """List all supported languages from the global registry."""
    return get_registry().list_supported_languages()
