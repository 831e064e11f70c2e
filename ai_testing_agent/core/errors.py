"""Exceptions raised by the core pipeline.

Core modules raise these; the service layer turns them into ServiceResult
failures for the MCP handlers.
"""


class AgentError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(AgentError):
    """Configuration file could not be read or failed validation."""


class ScanError(AgentError):
    """Source file could not be read for scanning."""


class GenerationError(AgentError):
    """LLM call failed or returned something we could not use."""


class NoAgentAvailableError(AgentError):
    """No LLM agent has been registered."""


class OutputParseError(AgentError):
    """Test runner output is not the structured data we expected.

    The raw output is kept for diagnostics.
    """

    def __init__(self, message: str, raw_output: str | None = None):
        super().__init__(message)
        self.raw_output = raw_output


class UnsupportedReportFormatError(AgentError, ValueError):
    """Report format outside the supported set."""

    def __init__(self, report_format: object):
        super().__init__(f"Unsupported report format: {report_format}")
        self.report_format = report_format


class ReportGenerationError(AgentError):
    """Report could not be written."""


class PipelineError(AgentError):
    """A pipeline stage failed; message names the stage."""
