"""
Language profile definitions for the lintface engine.

A profile is the ordered rule list plus lookup tables for one language.
Profiles are built once and shared read-only by every lint invocation for
that language.
"""

import fnmatch
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple, Type

from .types import LanguageProfile, Rule


# Reserved words and literals that may not appear as Java identifiers
JAVA_RESERVED_WORDS: FrozenSet[str] = frozenset({
    "abstract", "continue", "for", "new", "switch", "assert", "default", "goto",
    "package", "synchronized", "boolean", "do", "if", "private", "this", "break",
    "double", "implements", "protected", "throw", "byte", "else", "import", "public",
    "throws", "case", "enum", "instanceof", "return", "transient", "catch", "extends",
    "int", "short", "try", "char", "final", "interface", "static", "void", "class",
    "finally", "long", "strictfp", "volatile", "const", "float", "native", "super",
    "while", "true", "false", "null",
})

RESERVED_WORDS: Dict[str, FrozenSet[str]] = {
    "java": JAVA_RESERVED_WORDS,
}


def default_rule_classes(language_id: str) -> Tuple[Type, ...]:
    """Get the rule classes of a language in declared order."""
    # Imported here: rule modules import lint_engine.types
    from lint_rules import (
        RuleJavaConstructorName,
        RuleJavaKeywordIdentifier,
        RulePythonPrintCall,
        RuleRArrowAssignment,
    )

    # Diagnostics on one node follow this order
    default_rules: Dict[str, Tuple[Type, ...]] = {
        "java": (RuleJavaKeywordIdentifier, RuleJavaConstructorName),
        "python": (RulePythonPrintCall,),
        "r": (RuleRArrowAssignment,),
    }
    return default_rules.get(language_id, ())


def _matches_any(rule_id: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(rule_id, pattern) for pattern in patterns)


def select_rules(rules: Sequence[Rule], enabled_patterns: Sequence[str],
                 disabled_patterns: Sequence[str] = ()) -> List[Rule]:
    """
    Filter rules by id patterns, keeping declared order.

    Args:
        rules: Rules in profile order
        enabled_patterns: fnmatch patterns a rule id must match ("*" for all)
        disabled_patterns: fnmatch patterns that remove a rule again

    Returns:
        The selected rules, in their original order
    """
    selected = []
    for rule in rules:
        if not _matches_any(rule.meta.id, enabled_patterns):
            continue
        if _matches_any(rule.meta.id, disabled_patterns):
            continue
        selected.append(rule)
    return selected


def build_profile(language_id: str, enabled_patterns: Sequence[str] = ("*",),
                  disabled_patterns: Sequence[str] = ()) -> LanguageProfile:
    """
    Build the profile for a language.

    Languages without default rules still get a profile: the universal
    syntax error detector runs regardless of rules.
    """
    rules = [rule_class() for rule_class in default_rule_classes(language_id)]
    rules = select_rules(rules, enabled_patterns, disabled_patterns)
    return LanguageProfile(
        language_id=language_id,
        rules=tuple(rules),
        reserved_words=RESERVED_WORDS.get(language_id, frozenset()),
    )


def restrict_profile(profile: LanguageProfile, enabled_patterns: Sequence[str],
                     disabled_patterns: Sequence[str] = ()) -> LanguageProfile:
    """Derive a profile that keeps only the rules selected by the patterns."""
    rules = select_rules(profile.rules, enabled_patterns, disabled_patterns)
    if len(rules) == len(profile.rules):
        return profile
    return LanguageProfile(
        language_id=profile.language_id,
        rules=tuple(rules),
        reserved_words=profile.reserved_words,
    )
