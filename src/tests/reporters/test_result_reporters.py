"""Unit tests for run result reporters.

Tests text, JSON and Markdown report generation.
"""

import json

import pytest

from patternbench.models.example_models import RunPhase, RunResult, RunStatus
from patternbench.reporters import (
    JsonReporter,
    MarkdownReporter,
    TextReporter,
    get_reporter,
)


@pytest.fixture
def sample_results():
    """Create one result of each status."""
    return [
        RunResult(
            name="Singleton",
            status=RunStatus.SUCCESS,
            output=("instance-1==instance-2: true",),
            phases=(RunPhase.PENDING, RunPhase.SETUP, RunPhase.RUNNING, RunPhase.SUCCEEDED),
        ),
        RunResult(
            name="Strategy",
            status=RunStatus.FAILED,
            output=("paid 10 with credit card", "paid 15 using PayPal"),
            failure_reason=(
                "FailureMismatch: line 1: expected 'paid 15 with credit card', "
                "got 'paid 10 with credit card'"
            ),
        ),
        RunResult(
            name="Proxy",
            status=RunStatus.ERRORED,
            failure_reason="SetupError: image store\tunavailable\nretry later",
        ),
    ]


class TestTextReporter:
    """Test text reporter."""

    def test_generate_report(self, sample_results):
        """Test one line per result followed by the summary."""
        report = TextReporter().generate_report(sample_results)
        lines = report.split("\n")

        assert lines == [
            "SUCCESS\tSingleton\tok (1 line)",
            "FAILED\tStrategy\tFailureMismatch: line 1: expected 'paid 15 with credit card', "
            "got 'paid 10 with credit card'",
            "ERRORED\tProxy\tSetupError: image store unavailable retry later",
            "TOTAL=3 SUCCESS=1 FAILED=1 ERRORED=1",
        ]

    def test_every_line_has_three_columns(self, sample_results):
        """Test details never break the tab-separated layout."""
        report = TextReporter().generate_report(sample_results)

        for line in report.split("\n")[:-1]:
            assert len(line.split("\t")) == 3

    def test_empty_results(self):
        """Test an empty batch still has a summary."""
        assert TextReporter().generate_report([]) == "TOTAL=0 SUCCESS=0 FAILED=0 ERRORED=0"

    def test_plural_line_count(self):
        """Test the success detail counts output lines."""
        result = RunResult(name="Facade", status=RunStatus.SUCCESS, output=("a", "b"))
        assert TextReporter().format_result(result) == "SUCCESS\tFacade\tok (2 lines)"

    def test_report_is_stable(self, sample_results):
        """Test the same input always renders the same text."""
        reporter = TextReporter()
        assert reporter.generate_report(sample_results) == reporter.generate_report(sample_results)

    def test_accepts_generator(self, sample_results):
        """Test results can be any iterable."""
        report = TextReporter().generate_report(r for r in sample_results)
        assert report.endswith("TOTAL=3 SUCCESS=1 FAILED=1 ERRORED=1")


class TestJsonReporter:
    """Test JSON reporter."""

    def test_init(self):
        """Test JsonReporter initialization."""
        assert JsonReporter().pretty is True
        assert JsonReporter(pretty=False).pretty is False

    def test_generate_report(self, sample_results):
        """Test generating JSON report."""
        data = json.loads(JsonReporter().generate_report(sample_results))

        assert data["summary"] == {
            "total": 3,
            "succeeded": 1,
            "failed": 1,
            "errored": 1,
            "passed": False,
        }
        assert [r["name"] for r in data["results"]] == ["Singleton", "Strategy", "Proxy"]
        assert data["results"][0]["status"] == "success"
        assert data["results"][0]["output"] == ["instance-1==instance-2: true"]
        assert data["results"][0]["phases"] == ["pending", "setup", "running", "succeeded"]
        assert data["results"][2]["failure_reason"].startswith("SetupError")

    def test_generate_report_not_pretty(self, sample_results):
        """Test generating compact JSON."""
        output = JsonReporter(pretty=False).generate_report(sample_results)
        assert "\n" not in output
        assert json.loads(output)["summary"]["total"] == 3


class TestMarkdownReporter:
    """Test Markdown reporter."""

    def test_generate_report(self, sample_results):
        """Test generating Markdown report."""
        markdown = MarkdownReporter().generate_report(sample_results)

        assert markdown.startswith("# Pattern Examples")
        assert "**Total:** 3" in markdown
        assert "| Status | Example | Lines |" in markdown
        assert "| Strategy | 2 |" in markdown
        assert "## Failures" in markdown
        assert "### Proxy" in markdown
        assert "### Singleton" not in markdown

    def test_include_output(self, sample_results):
        """Test listing the output of failed examples."""
        markdown = MarkdownReporter(include_output=True).generate_report(sample_results)
        assert "```\npaid 10 with credit card\npaid 15 using PayPal\n```" in markdown

    def test_all_passed(self):
        """Test a passing batch has no failure section."""
        results = [RunResult(name="State", status=RunStatus.SUCCESS, output=("x",))]
        markdown = MarkdownReporter().generate_report(results)

        assert "✅" in markdown
        assert "## Failures" not in markdown

    def test_escapes_pipes(self):
        """Test pipes in reasons are escaped."""
        results = [RunResult(name="State", status=RunStatus.FAILED, failure_reason="a|b")]
        assert "a\\|b" in MarkdownReporter().generate_report(results)


class TestGetReporter:
    """Test reporter factory."""

    @pytest.mark.parametrize(
        "output_format,reporter_class",
        [("text", TextReporter), ("json", JsonReporter), ("markdown", MarkdownReporter)],
    )
    def test_known_formats(self, output_format, reporter_class):
        assert isinstance(get_reporter(output_format), reporter_class)

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            get_reporter("html")
