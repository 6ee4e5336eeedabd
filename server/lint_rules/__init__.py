"""
Diagnostic rules for the lintface engine.

Each module defines one rule class exposing ``meta`` and ``visit``. The
per-language ordering lives in ``lint_engine.profiles``.
"""

from .java_keyword_identifier import RuleJavaKeywordIdentifier
from .java_constructor_name import RuleJavaConstructorName
from .python_print_call import RulePythonPrintCall
from .r_arrow_assignment import RuleRArrowAssignment

__all__ = [
    "RuleJavaKeywordIdentifier",
    "RuleJavaConstructorName",
    "RulePythonPrintCall",
    "RuleRArrowAssignment",
]
