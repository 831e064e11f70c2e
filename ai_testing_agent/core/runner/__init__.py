"""Test runner module - executes Jest/Playwright and normalizes results."""

from .analysis import analyze_results
from .executor import (
    RUNNERS,
    BaseTestRunner,
    JestTestRunner,
    PlaywrightTestRunner,
    create_runner,
)
from .models import AnalysisSummary, FailedTestRef, RunAnalysis, TestResult
from .parsers import parse_jest_results, parse_playwright_results, parse_runner_output

__all__ = [
    "BaseTestRunner",
    "JestTestRunner",
    "PlaywrightTestRunner",
    "RUNNERS",
    "create_runner",
    "analyze_results",
    "parse_runner_output",
    "parse_jest_results",
    "parse_playwright_results",
    "TestResult",
    "FailedTestRef",
    "AnalysisSummary",
    "RunAnalysis",
]
