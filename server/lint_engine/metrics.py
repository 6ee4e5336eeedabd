"""
Lint metrics collection.

``LintMetrics`` is an explicitly owned, thread-safe handle. Whoever builds a
``Linter`` decides which handle it writes to; nothing here is global.
"""

import threading
from collections import defaultdict
from typing import Any, Dict, List


class LintMetrics:
    """In-memory counters for lint invocations."""

    def __init__(self):
        self._requests_total = 0
        self._requests_by_language: Dict[str, int] = defaultdict(int)
        self._last_duration_seconds = 0.0
        self._errors_total = 0

        # Thread safety
        self._lock = threading.Lock()

    def record_request(self, language: str) -> None:
        """Count one lint request for ``language``."""
        with self._lock:
            self._requests_total += 1
            self._requests_by_language[language] += 1

    def record_duration(self, seconds: float) -> None:
        """Set the duration of the most recent lint invocation."""
        with self._lock:
            self._last_duration_seconds = seconds

    def record_diagnostics(self, count: int) -> None:
        """Add the number of diagnostics an invocation produced."""
        with self._lock:
            self._errors_total += count

    def record_failure(self) -> None:
        """Count a failed invocation as one error."""
        with self._lock:
            self._errors_total += 1

    def snapshot(self) -> Dict[str, Any]:
        """Get a consistent copy of every metric."""
        with self._lock:
            return {
                "lint_requests_total": self._requests_total,
                "lint_requests_by_language": dict(self._requests_by_language),
                "lint_duration_seconds": self._last_duration_seconds,
                "lint_errors_total": self._errors_total,
            }

    def render_prometheus(self) -> str:
        """Render the metrics in Prometheus text exposition format."""
        snap = self.snapshot()
        lines: List[str] = [
            "# HELP lint_requests_total Total number of linting requests.",
            "# TYPE lint_requests_total counter",
            f"lint_requests_total {float(snap['lint_requests_total'])}",
            "# HELP lint_requests_by_language Total number of linting requests by language.",
            "# TYPE lint_requests_by_language counter",
        ]
        for language, count in sorted(snap["lint_requests_by_language"].items()):
            label = language.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            lines.append(f'lint_requests_by_language{{language="{label}"}} {count}')
        lines.extend([
            "# HELP lint_duration_seconds Duration of linting requests in seconds.",
            "# TYPE lint_duration_seconds gauge",
            f"lint_duration_seconds {snap['lint_duration_seconds']}",
            "# HELP lint_errors_total Total number of linting errors found.",
            "# TYPE lint_errors_total counter",
            f"lint_errors_total {float(snap['lint_errors_total'])}",
        ])
        return "\n".join(lines) + "\n"

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._requests_total = 0
            self._requests_by_language.clear()
            self._last_duration_seconds = 0.0
            self._errors_total = 0
