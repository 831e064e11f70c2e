"""
Result types shared by the services.

Core code raises AgentError subclasses. Services catch them at the edge and
hand the MCP handlers a ServiceResult instead, so a handler only ever
branches on ``result.success``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from ..core.errors import (
    AgentError,
    ConfigError,
    GenerationError,
    NoAgentAvailableError,
    OutputParseError,
    ReportGenerationError,
    ScanError,
    UnsupportedReportFormatError,
)

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Machine-readable failure category, serialized as its value."""

    # Bad tool arguments
    MISSING_INPUT = "missing_input"
    VALIDATION_ERROR = "validation_error"
    INVALID_EXTENSION = "invalid_extension"
    FILE_NOT_FOUND = "file_not_found"
    FILE_TOO_LARGE = "file_too_large"
    PERMISSION_DENIED = "permission_denied"

    # Pipeline stages, in order
    CONFIG_ERROR = "config_error"
    SCAN_ERROR = "scan_error"
    AI_UNAVAILABLE = "ai_unavailable"
    AI_ERROR = "ai_error"
    EXECUTION_ERROR = "execution_error"
    PARSE_ERROR = "parse_error"
    UNSUPPORTED_FORMAT = "unsupported_format"
    REPORT_ERROR = "report_error"

    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ServiceError:
    """Why a service call failed; ``details`` carries optional context."""
    code: ErrorCode
    message: str
    details: dict | None = None

    def to_dict(self) -> dict:
        data = {"code": self.code.value, "message": self.message}
        if self.details:
            data["details"] = self.details
        return data


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Outcome of a service call: ``data`` on success, ``error`` otherwise.

    Example:
        result = await ExecutionService().run("test/calc.test.ts")
        if result.success:
            print(result.data.summary.pass_rate)
        else:
            print(result.error.code, result.error.message)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ) -> ServiceResult[T]:
        return cls(success=False, error=ServiceError(code, message, details))

    @classmethod
    def from_exception(cls, error: AgentError) -> ServiceResult[T]:
        """
        Turn a core exception into a failed result.

        A PipelineError is classified by the error it wraps; the message
        stays the outer one, which names the failed stage.
        """
        cause = error.__cause__ if isinstance(error.__cause__, AgentError) else error

        details = None
        if isinstance(cause, OutputParseError) and cause.raw_output is not None:
            details = {"raw_output": cause.raw_output}

        return cls.fail(_code_for(cause), str(error), details)

    def unwrap(self) -> T:
        """
        Return ``data``.

        Raises:
            ValueError: On a failed result
        """
        if self.success and self.data is not None:
            return self.data

        reason = self.error.message if self.error else "Unknown error"
        raise ValueError(f"Cannot unwrap failed result: {reason}")


_CODES: tuple[tuple[type[AgentError], ErrorCode], ...] = (
    (ConfigError, ErrorCode.CONFIG_ERROR),
    (ScanError, ErrorCode.SCAN_ERROR),
    (NoAgentAvailableError, ErrorCode.AI_UNAVAILABLE),
    (GenerationError, ErrorCode.AI_ERROR),
    (OutputParseError, ErrorCode.PARSE_ERROR),
    (UnsupportedReportFormatError, ErrorCode.UNSUPPORTED_FORMAT),
    (ReportGenerationError, ErrorCode.REPORT_ERROR),
)


def _code_for(error: AgentError) -> ErrorCode:
    for error_type, code in _CODES:
        if isinstance(error, error_type):
            return code
    return ErrorCode.EXECUTION_ERROR
