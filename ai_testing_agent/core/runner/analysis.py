"""Aggregate pass/fail statistics over a run's results."""

from collections.abc import Sequence

from .models import AnalysisSummary, FailedTestRef, RunAnalysis, TestResult


def analyze_results(results: Sequence[TestResult]) -> RunAnalysis:
    """Partition results by outcome and compute totals (pure, no I/O)."""

    passed = [r for r in results if r.passed]
    failed = [r for r in results if not r.passed]
    total = len(results)

    # Full precision; presentation layers round.
    pass_rate = (len(passed) / total) * 100 if total else 0.0

    summary = AnalysisSummary(
        total=total,
        passed=len(passed),
        failed=len(failed),
        pass_rate=pass_rate,
        total_duration=sum(r.duration for r in results),
    )

    return RunAnalysis(
        summary=summary,
        failed_tests=[FailedTestRef(test_id=r.test_id, error=r.error) for r in failed],
    )
