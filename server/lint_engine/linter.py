"""
Lint entry point for the tree-sitter engine.

This module ties the registry, the adapters and the walker together:
resolve the language, parse the source, walk the tree.
"""

import logging
import time
from typing import Dict, List, Optional

from .config import EngineConfig
from .errors import LintError
from .metrics import LintMetrics
from .profiles import restrict_profile
from .registry import Registry, get_registry
from .types import Diagnostic, LanguageProfile
from .walker import walk

logger = logging.getLogger(__name__)

# Per-language metrics label for ids with no registered binding
UNSUPPORTED_LANGUAGE_LABEL = "unsupported"


def lint(language: str, source: str, registry: Optional[Registry] = None,
         profile: Optional[LanguageProfile] = None) -> List[Diagnostic]:
    """
    Lint one source string.

    Args:
        language: Language id, e.g. "java", "python" or "r"
        source: Source text to lint
        registry: Registry to resolve against (defaults to the global one)
        profile: Overrides the bound profile for this call

    Returns:
        Diagnostics in visitation order; empty when the source is clean

    Raises:
        UnsupportedLanguageError: no binding for ``language``; no parser is built
        ParserConfigurationError: the grammar could not be bound
        ParseFailureError: the parser returned no tree
    """
    binding = (registry or get_registry()).resolve(language)

    logger.debug("Parsing %d characters of %s", len(source), language)
    tree = binding.adapter.parse(source)

    diagnostics = walk(tree.root_node, source, profile or binding.profile)
    logger.debug("Found %d diagnostics in %s source", len(diagnostics), language)
    return diagnostics


class Linter:
    """Lint entry point that owns its configuration and metrics handle."""

    def __init__(self, registry: Optional[Registry] = None,
                 metrics: Optional[LintMetrics] = None,
                 config: Optional[EngineConfig] = None):
        self.registry = registry or get_registry()
        self.metrics = metrics or LintMetrics()
        self.config = config or EngineConfig()
        self._profiles: Dict[str, LanguageProfile] = {}

    def _profile_for(self, language: str) -> LanguageProfile:
        profile = self._profiles.get(language)
        if profile is None:
            binding = self.registry.resolve(language)
            profile = restrict_profile(
                binding.profile, self.config.enabled_rules, self.config.disabled_rules,
            )
            self._profiles[language] = profile
        return profile

    def _language_label(self, language: str) -> str:
        # Unregistered ids share one label
        if self.registry.get(language) is None:
            return UNSUPPORTED_LANGUAGE_LABEL
        return language

    def supported_languages(self) -> List[str]:
        return self.registry.list_supported_languages()

    def lint(self, language: str, source: str) -> List[Diagnostic]:
        """Lint one source string and record the outcome in ``self.metrics``.

        Failures are counted and then re-raised unchanged.
        """
        self.metrics.record_request(self._language_label(language))
        start_time = time.perf_counter()
        diagnostics = None

        try:
            diagnostics = lint(language, source, self.registry, self._profile_for(language))
        except LintError as e:
            logger.error("Linter error (%s): %s", e.kind, e.message)
            raise
        finally:
            self.metrics.record_duration(time.perf_counter() - start_time)
            if diagnostics is None:
                self.metrics.record_failure()

        self.metrics.record_diagnostics(len(diagnostics))
        return diagnostics
