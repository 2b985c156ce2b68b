"""JSON report for CI systems and other programmatic consumers."""

import json
from typing import Any, Dict, Iterable

from ..models.example_models import RunResult, RunSummary


class JsonReporter:
    """
    Generate JSON reports.

    PATTERN: Structured JSON output for programmatic access
    GOTCHA: Enums serialize as their values, tuples as lists
    """

    def __init__(self, pretty: bool = True):
        """
        Initialize JSON reporter.

        Args:
            pretty: Whether to pretty-print JSON output
        """
        self.pretty = pretty

    def generate_report(self, results: Iterable[RunResult]) -> str:
        """
        Serialize results and their summary.

        Args:
            results: Run results in execution order

        Returns:
            JSON string
        """
        report = self._report_to_dict(list(results))
        if self.pretty:
            return json.dumps(report, indent=2)
        return json.dumps(report)

    def _report_to_dict(self, results: list) -> Dict[str, Any]:
        summary = RunSummary.from_results(results)
        return {
            "summary": {
                "total": summary.total,
                "succeeded": summary.succeeded,
                "failed": summary.failed,
                "errored": summary.errored,
                "passed": summary.passed,
            },
            "results": [result.model_dump(mode="json") for result in results],
        }
