"""
Runner output decoders.

Both Jest (``--json``) and Playwright (``--reporter=json``) print one JSON
document on stdout, but with different shapes:

- Jest: flat ``testResults[*].assertionResults[*]``
- Playwright: a suite tree, ``suites[*]`` nesting ``suites`` and ``specs``,
  each spec holding one ``tests`` entry per run (browser project, retry)

Each decoder turns its shape into the same list of TestResult. The caller
picks the decoder by RunnerFamily; nothing here sniffs the shape.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from ..errors import OutputParseError
from ..types import RunnerFamily
from .models import TestResult

SUITE_SEPARATOR = " › "

PASSING_PLAYWRIGHT_STATUSES = frozenset({"passed", "expected"})


def parse_runner_output(text: str, family: RunnerFamily) -> list[TestResult]:
    """Decode raw runner stdout with the decoder for ``family``."""

    tool = _TOOL_NAMES[family]
    decoder = _DECODERS[family]

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise OutputParseError(
            f"Failed to parse {tool} results: {e}", raw_output=text
        ) from e

    try:
        return decoder(data)
    except OutputParseError as e:
        raise OutputParseError(
            f"Failed to parse {tool} results: {e}", raw_output=text
        ) from e


def parse_jest_results(data: Any) -> list[TestResult]:
    """Flatten Jest's suite results into one TestResult per assertion."""

    data = _expect_dict(data, "Jest output")
    if "testResults" not in data:
        raise OutputParseError("missing 'testResults'")

    suites = _expect_list(data["testResults"], "testResults")
    results = []

    for suite in suites:
        suite = _expect_dict(suite, "testResults entry")
        assertions = _expect_list(suite.get("assertionResults", []), "assertionResults")

        for assertion in assertions:
            assertion = _expect_dict(assertion, "assertionResults entry")
            messages = assertion.get("failureMessages") or []

            results.append(TestResult(
                test_id=assertion.get("fullName") or assertion.get("title") or "",
                passed=assertion.get("status") == "passed",
                error="\n".join(str(m) for m in messages) or None,
                duration=_duration(assertion.get("duration")),
            ))

    return results


def parse_playwright_results(data: Any) -> list[TestResult]:
    """Walk Playwright's suite tree and flatten every test run."""

    roots = _expect_list(_expect_dict(data, "Playwright output").get("suites", []), "suites")
    results = []

    # Depth-first, a suite's own specs before its children, siblings in order
    stack = list(reversed(roots))
    while stack:
        suite = _expect_dict(stack.pop(), "suite")
        suite_title = suite.get("title") or ""

        for spec in _expect_list(suite.get("specs", []), "specs"):
            spec = _expect_dict(spec, "spec")
            test_id = f"{suite_title}{SUITE_SEPARATOR}{spec.get('title') or ''}"

            for test in _expect_list(spec.get("tests", []), "tests"):
                test = _expect_dict(test, "test")
                results.append(TestResult(
                    test_id=test_id,
                    passed=test.get("status") in PASSING_PLAYWRIGHT_STATUSES,
                    error=_join_errors(test.get("errors")),
                    duration=_duration(test.get("duration")),
                ))

        children = _expect_list(suite.get("suites", []), "suites")
        stack.extend(reversed(children))

    return results


# =============================================================================
# Helpers
# =============================================================================

def _join_errors(errors: Any) -> str | None:
    """Stringify Playwright error objects, one per line."""
    if not errors:
        return None

    lines = []
    for error in errors:
        if isinstance(error, dict) and error.get("message"):
            lines.append(str(error["message"]))
        elif isinstance(error, str):
            lines.append(error)
        else:
            lines.append(json.dumps(error))

    return "\n".join(lines) or None


def _duration(value: Any) -> int:
    """Coerce a reported duration to non-negative whole milliseconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(int(round(value)), 0)


def _expect_dict(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise OutputParseError(f"expected an object for {what}, got {type(value).__name__}")
    return value


def _expect_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise OutputParseError(f"expected an array for {what}, got {type(value).__name__}")
    return value


_DECODERS: dict[RunnerFamily, Callable[[Any], list[TestResult]]] = {
    RunnerFamily.JEST: parse_jest_results,
    RunnerFamily.PLAYWRIGHT: parse_playwright_results,
}

_TOOL_NAMES: dict[RunnerFamily, str] = {
    RunnerFamily.JEST: "Jest",
    RunnerFamily.PLAYWRIGHT: "Playwright",
}
