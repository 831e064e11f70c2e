"""Reporting - render run results as JSON or JUnit XML files."""

from .renderers import (
    RENDERERS,
    JsonReportRenderer,
    JUnitReportRenderer,
    ReportRenderer,
    escape_xml,
    get_renderer,
)
from .reporter import ReportOptions, TestReporter, iso_timestamp

__all__ = [
    "TestReporter",
    "ReportOptions",
    "ReportRenderer",
    "JsonReportRenderer",
    "JUnitReportRenderer",
    "RENDERERS",
    "get_renderer",
    "escape_xml",
    "iso_timestamp",
]
