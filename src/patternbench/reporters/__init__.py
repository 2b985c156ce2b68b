"""Run result reporters.

Text output for terminals and scripts, JSON for CI systems and Markdown for
PR comments.
"""

from .json_reporter import JsonReporter
from .markdown_reporter import MarkdownReporter
from .text_reporter import TextReporter

REPORT_FORMATS = ("text", "json", "markdown")


def get_reporter(output_format: str = "text"):
    """
    Create a reporter for an output format.

    Args:
        output_format: One of ``text``, ``json`` or ``markdown``

    Returns:
        Reporter exposing ``generate_report(results)``

    Raises:
        ValueError: If the format is unknown
    """
    if output_format == "text":
        return TextReporter()
    if output_format == "json":
        return JsonReporter()
    if output_format == "markdown":
        return MarkdownReporter()
    raise ValueError(
        f"Unknown report format '{output_format}', expected one of {', '.join(REPORT_FORMATS)}"
    )


__all__ = [
    "JsonReporter",
    "MarkdownReporter",
    "TextReporter",
    "REPORT_FORMATS",
    "get_reporter",
]
