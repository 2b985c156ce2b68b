"""Markdown report for PR comments and documentation."""

from typing import Iterable, List

from ..models.example_models import RunResult, RunStatus, RunSummary
from .text_reporter import one_line


STATUS_EMOJI = {
    RunStatus.SUCCESS: "✅",
    RunStatus.FAILED: "❌",
    RunStatus.ERRORED: "💥",
}


class MarkdownReporter:
    """
    Generate GitHub-flavored Markdown reports.

    PATTERN: Summary table followed by per-example details
    GOTCHA: Pipes in failure reasons are escaped to keep the table intact
    """

    def __init__(self, include_output: bool = False):
        """
        Initialize Markdown reporter.

        Args:
            include_output: Whether to list output lines of failed examples
        """
        self.include_output = include_output

    def generate_report(self, results: Iterable[RunResult]) -> str:
        """
        Render results as Markdown.

        Args:
            results: Run results in execution order

        Returns:
            Markdown string
        """
        results = list(results)
        summary = RunSummary.from_results(results)

        sections = [
            self._generate_header(summary),
            self._generate_table(results),
            self._generate_failures(results),
        ]
        return "\n\n".join(filter(None, sections))

    def _generate_header(self, summary: RunSummary) -> str:
        status_emoji = "✅" if summary.passed else "❌"
        return (
            f"# Pattern Examples {status_emoji}\n\n"
            f"**Total:** {summary.total} | **Succeeded:** {summary.succeeded} | "
            f"**Failed:** {summary.failed} | **Errored:** {summary.errored}"
        )

    def _generate_table(self, results: List[RunResult]) -> str:
        if not results:
            return ""

        table = "| Status | Example | Lines |\n"
        table += "|--------|---------|-------|\n"
        for result in results:
            table += (
                f"| {STATUS_EMOJI[result.status]} {result.status.value} "
                f"| {result.name} | {len(result.output)} |\n"
            )
        return table.rstrip("\n")

    def _generate_failures(self, results: List[RunResult]) -> str:
        failures = [r for r in results if not r.succeeded]
        if not failures:
            return ""

        section = "## Failures\n"
        for result in failures:
            reason = one_line(result.failure_reason or "").replace("|", "\\|")
            section += f"\n### {result.name}\n\n{reason}\n"
            if self.include_output and result.output:
                section += "\n```\n" + "\n".join(result.output) + "\n```\n"
        return section.rstrip("\n")
