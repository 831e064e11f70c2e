"""Shared enums and input models for the testing pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TestType(str, Enum):
    """Kind of test the LLM is asked to write."""
    __test__ = False

    UNIT = "unit"
    INTEGRATION = "integration"
    E2E = "e2e"
    PERFORMANCE = "performance"


class TestFramework(str, Enum):
    """JavaScript test frameworks we can generate code for."""
    __test__ = False

    JEST = "jest"
    MOCHA = "mocha"
    CYPRESS = "cypress"
    PLAYWRIGHT = "playwright"


class ReportFormat(str, Enum):
    """On-disk report formats."""

    JSON = "json"
    XML = "xml"


class RunnerFamily(str, Enum):
    """
    Runner binary family, which also selects the output decoder.

    JEST emits flat suite results (testResults -> assertionResults),
    PLAYWRIGHT emits a nested suite tree (suites -> specs -> tests).
    """

    JEST = "jest"
    PLAYWRIGHT = "playwright"


_FAMILY_BY_FRAMEWORK: dict[TestFramework, RunnerFamily] = {
    TestFramework.JEST: RunnerFamily.JEST,
    TestFramework.MOCHA: RunnerFamily.JEST,
    TestFramework.PLAYWRIGHT: RunnerFamily.PLAYWRIGHT,
    TestFramework.CYPRESS: RunnerFamily.PLAYWRIGHT,
}


def runner_family_for(framework: TestFramework | str) -> RunnerFamily:
    """Map a framework to the runner family that executes it (Jest by default)."""
    try:
        return _FAMILY_BY_FRAMEWORK[TestFramework(framework)]
    except ValueError:
        return RunnerFamily.JEST


@dataclass
class TestCase:
    """A single LLM-proposed test case."""
    __test__ = False

    id: str
    description: str
    input: Any = None
    expected_output: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> TestCase:
        """Build from LLM JSON (accepts camelCase or snake_case keys)."""
        expected = data.get("expectedOutput", data.get("expected_output"))
        return cls(
            id=str(data.get("id", "")),
            description=str(data.get("description", "")),
            input=data.get("input"),
            expected_output=expected,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "input": self.input,
            "expectedOutput": self.expected_output,
        }


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReportingOptions(_CamelModel):
    """Per-run reporting settings."""

    formats: list[ReportFormat] = Field(default_factory=list)
    output_path: str | None = None
    include_timestamp: bool = True


class TestConfig(_CamelModel):
    """Validated settings for one generate-and-run invocation."""

    type: TestType = TestType.UNIT
    framework: TestFramework = TestFramework.JEST
    source_path: str
    test_path: str
    coverage: float | None = Field(default=None, ge=0, le=100)
    max_retries: int | None = Field(default=None, ge=0)
    timeout: int | None = Field(default=None, ge=0)
    reporting: ReportingOptions | None = None
