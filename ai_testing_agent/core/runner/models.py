"""Data models for test runner."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TestResult:
    """Outcome of a single executed test case (duration in milliseconds)."""
    __test__ = False

    test_id: str
    passed: bool
    error: str | None = None
    duration: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.test_id,
            "status": "passed" if self.passed else "failed",
            "duration": self.duration,
            "error": self.error or None,
        }


@dataclass(frozen=True)
class FailedTestRef:
    """Identifier and error of a failing test."""
    test_id: str
    error: str | None = None

    def to_dict(self) -> dict:
        return {"test_id": self.test_id, "error": self.error}


@dataclass(frozen=True)
class AnalysisSummary:
    """Aggregate statistics over one run's results."""
    total: int
    passed: int
    failed: int
    pass_rate: float
    total_duration: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "pass_rate": self.pass_rate,
            "total_duration": self.total_duration,
        }


@dataclass(frozen=True)
class RunAnalysis:
    """Summary plus the failing tests of one run."""
    summary: AnalysisSummary
    failed_tests: list[FailedTestRef] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.summary.total > 0 and self.summary.failed == 0

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "failed_tests": [f.to_dict() for f in self.failed_tests],
        }
