"""Core domain logic for the testing agent."""

from .errors import (
    AgentError,
    ConfigError,
    GenerationError,
    NoAgentAvailableError,
    OutputParseError,
    PipelineError,
    ReportGenerationError,
    ScanError,
    UnsupportedReportFormatError,
)
from .types import (
    ReportFormat,
    ReportingOptions,
    RunnerFamily,
    TestCase,
    TestConfig,
    TestFramework,
    TestType,
    runner_family_for,
)
from .reporting import ReportOptions, TestReporter
from .runner import (
    AnalysisSummary,
    FailedTestRef,
    JestTestRunner,
    PlaywrightTestRunner,
    RunAnalysis,
    TestResult,
    analyze_results,
)
from .scanner import ParsedModule, parse_code, parse_file
from .agents import Agent, AgentManager, OpenAIAgent
from .generators import AITestGenerator
from .manager import TestManager, default_test_path, detect_framework_from_content

__all__ = [
    # Errors
    "AgentError",
    "ConfigError",
    "ScanError",
    "GenerationError",
    "NoAgentAvailableError",
    "OutputParseError",
    "UnsupportedReportFormatError",
    "ReportGenerationError",
    "PipelineError",
    # Types
    "TestType",
    "TestFramework",
    "ReportFormat",
    "RunnerFamily",
    "runner_family_for",
    "TestCase",
    "TestConfig",
    "ReportingOptions",
    # Reporting
    "TestReporter",
    "ReportOptions",
    # Runner
    "JestTestRunner",
    "PlaywrightTestRunner",
    "TestResult",
    "FailedTestRef",
    "AnalysisSummary",
    "RunAnalysis",
    "analyze_results",
    # Scanner
    "parse_code",
    "parse_file",
    "ParsedModule",
    # Agents
    "Agent",
    "AgentManager",
    "OpenAIAgent",
    # Generation
    "AITestGenerator",
    # Orchestration
    "TestManager",
    "default_test_path",
    "detect_framework_from_content",
]
