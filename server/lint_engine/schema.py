"""
JSON wire format for lint results.

Successful results are a JSON array of ``{line, column, message}`` objects.
Failures are reported with one shape on every surface:
``{"error": {"kind": ..., "message": ...}}``.
"""

from typing import Any, Dict, Iterable, List

from .errors import LintError
from .types import Diagnostic


def diagnostics_to_json(diagnostics: Iterable[Diagnostic]) -> List[Dict[str, Any]]:
    """Convert diagnostics to JSON-serialisable dicts, preserving order."""
    return [diagnostic.to_dict() for diagnostic in diagnostics]


def failure_to_json(error: LintError) -> Dict[str, Any]:
    """Convert an engine failure to the structured error object."""
    return {"error": {"kind": error.kind, "message": error.message}}


def failure_to_diagnostic(error: LintError) -> Dict[str, Any]:
    """
    Convert an engine failure to a synthetic diagnostic at line 0, column 0.

    Line and column 0 never occur for real diagnostics, so callers that only
    understand diagnostic arrays can still tell a failure apart.
    """
    return {"line": 0, "column": 0, "message": error.message}
