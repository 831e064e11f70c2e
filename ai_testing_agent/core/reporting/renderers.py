"""
Report renderers.

One renderer per ReportFormat. The set is closed: ``get_renderer`` looks the
format up in RENDERERS and rejects anything else.
"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...constants import JUNIT_SUITE_NAME, JUNIT_SUITES_NAME
from ..errors import UnsupportedReportFormatError
from ..types import ReportFormat

if TYPE_CHECKING:
    from ..runner.models import RunAnalysis, TestResult


class ReportRenderer(ABC):
    """Turns a run's results into report text."""

    extension: str

    @abstractmethod
    def render(
        self,
        results: Sequence[TestResult],
        analysis: RunAnalysis,
        timestamp: str
    ) -> str:
        """Render the full report document."""
        pass


class JsonReportRenderer(ReportRenderer):
    """Structured JSON report."""

    extension = "json"

    def render(self, results, analysis, timestamp):
        report = {
            "timestamp": timestamp,
            "summary": analysis.summary.to_dict(),
            "tests": [r.to_dict() for r in results],
            "failures": [f.to_dict() for f in analysis.failed_tests],
        }
        return json.dumps(report, indent=2, ensure_ascii=False)


class JUnitReportRenderer(ReportRenderer):
    """JUnit-style XML report, readable by CI systems."""

    extension = "xml"

    def render(self, results, analysis, timestamp):
        summary = analysis.summary
        total_time = _seconds(summary.total_duration)

        lines = ['<?xml version="1.0" encoding="UTF-8"?>']
        lines.append(
            f'<testsuites name="{escape_xml(JUNIT_SUITES_NAME)}" time="{total_time}" '
            f'tests="{summary.total}" failures="{summary.failed}" '
            f'timestamp="{escape_xml(timestamp)}">'
        )
        lines.append(
            f'  <testsuite name="{escape_xml(JUNIT_SUITE_NAME)}" tests="{summary.total}" '
            f'failures="{summary.failed}" time="{total_time}">'
        )

        for result in results:
            case = f'    <testcase name="{escape_xml(result.test_id)}" time="{_seconds(result.duration)}"'
            if result.passed:
                lines.append(case + "/>")
                continue

            error = escape_xml(result.error or "")
            lines.append(case + ">")
            lines.append(f'      <failure message="{error}">{error}</failure>')
            lines.append("    </testcase>")

        lines.append("  </testsuite>")
        lines.append("</testsuites>")

        return "\n".join(lines)


_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def escape_xml(text: str | None) -> str:
    """
    Escape the five XML special characters (ampersand first).

    Characters XML 1.0 cannot carry at all (C0 controls other than tab, LF
    and CR, U+FFFE, U+FFFF), such as the ANSI colour codes in Jest failure
    messages, are dropped.
    """
    if not text:
        return ""
    text = _XML_INVALID_CHARS.sub("", text)
    return (text.replace("&", "&amp;")
                .replace("<", "&lt;")
                .replace(">", "&gt;")
                .replace('"', "&quot;")
                .replace("'", "&apos;"))


def _seconds(duration_ms: int) -> str:
    return f"{duration_ms / 1000:.2f}"


RENDERERS: dict[ReportFormat, ReportRenderer] = {
    ReportFormat.JSON: JsonReportRenderer(),
    ReportFormat.XML: JUnitReportRenderer(),
}


def get_renderer(report_format: ReportFormat | str) -> ReportRenderer:
    """Return the renderer for a format, or raise UnsupportedReportFormatError."""
    try:
        return RENDERERS[ReportFormat(report_format)]
    except (ValueError, KeyError):
        raise UnsupportedReportFormatError(report_format) from None
