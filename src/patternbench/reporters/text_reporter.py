"""Line-oriented text report for terminals and scripts.

Format, one line per attempted example followed by a summary::

    <STATUS> TAB <name> TAB <one-line-detail>
    TOTAL=<n> SUCCESS=<n> FAILED=<n> ERRORED=<n>
"""

from typing import Iterable, List

from ..models.example_models import RunResult, RunSummary


def one_line(text: str) -> str:
    """Collapse tabs, newlines and repeated spaces into single spaces."""
    return " ".join(text.split())


class TextReporter:
    """
    Generate stable, diffable text reports.

    PATTERN: Pure function of the result sequence
    CRITICAL: Exactly one line per result, even for errored examples
    GOTCHA: Details are flattened so the tab-separated columns stay intact
    """

    def generate_report(self, results: Iterable[RunResult]) -> str:
        """
        Render results as tab-separated lines plus a summary line.

        Args:
            results: Run results in execution order

        Returns:
            Report text without trailing newline
        """
        results = list(results)
        lines: List[str] = [self.format_result(result) for result in results]
        lines.append(self.format_summary(RunSummary.from_results(results)))
        return "\n".join(lines)

    def format_result(self, result: RunResult) -> str:
        """Render one result line."""
        return f"{result.status.value.upper()}\t{result.name}\t{self._detail(result)}"

    def format_summary(self, summary: RunSummary) -> str:
        """Render the summary line."""
        return (
            f"TOTAL={summary.total} SUCCESS={summary.succeeded} "
            f"FAILED={summary.failed} ERRORED={summary.errored}"
        )

    def _detail(self, result: RunResult) -> str:
        if result.failure_reason:
            return one_line(result.failure_reason)

        count = len(result.output)
        return f"ok ({count} line{'' if count == 1 else 's'})"
