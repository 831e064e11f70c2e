"""Run Jest or Playwright as a subprocess and normalize its JSON output."""

from __future__ import annotations

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ...constants import EXECUTION_ERROR_ID, JEST_COMMAND, PLAYWRIGHT_COMMAND, TEST_ENV
from ..errors import OutputParseError
from ..reporting import ReportOptions, TestReporter
from ..types import ReportFormat, RunnerFamily
from .analysis import analyze_results
from .models import RunAnalysis, TestResult
from .parsers import parse_runner_output

logger = logging.getLogger(__name__)


class BaseTestRunner(ABC):
    """
    Shared subprocess handling for JSON-emitting test runners.

    Subclasses name their tool, their default command and how options map
    to command-line flags. Output decoding is picked by ``family``.
    """
    __test__ = False

    family: RunnerFamily
    tool_name: str
    default_command: tuple[str, ...]

    def __init__(
        self,
        project_root: str | Path | None = None,
        reporter: TestReporter | None = None,
        command: Sequence[str] | None = None
    ):
        """
        Initialize the runner.

        Args:
            project_root: Working directory for the runner process (default: cwd)
            reporter: TestReporter used by generate_report (creates default if None)
            command: Executable plus leading arguments (default: the npx command)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.reporter = reporter or TestReporter()
        self.command = tuple(command) if command else self.default_command

    @abstractmethod
    def build_options(self, options: dict[str, Any]) -> list[str]:
        """Translate recognized option keys into flags; ignore the rest."""
        pass

    async def run_tests(
        self,
        test_path: str | Path,
        options: dict[str, Any] | None = None
    ) -> list[TestResult]:
        """
        Run the test file and return normalized results.

        A failed or unstartable process degrades to a single synthetic
        failing result. Unparsable output from a successful process raises.

        Raises:
            OutputParseError: Exit code 0 but stdout is not the expected JSON
        """
        logger.info(f"Running {self.tool_name} tests at {test_path}")

        argv = [*self.command, str(test_path), *self.build_options(options or {})]

        try:
            returncode, stdout, stderr = await self._execute(argv)
        except OSError as e:
            logger.error(f"Could not start {self.tool_name} for {test_path}: {e}")
            return [self._execution_error(f"Failed to start {self.tool_name}: {e}")]

        if returncode == 0:
            self._log_stderr(stderr)
            try:
                return parse_runner_output(stdout, self.family)
            except OutputParseError as e:
                logger.error(f"Error parsing {self.tool_name} results: {e}\nRaw output:\n{e.raw_output}")
                raise

        message = f"{self.tool_name} exited with code {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        logger.error(f"Error running {self.tool_name} tests at {test_path}: {message}")

        # A failing test run still prints its report; keep it when we can read it
        if stdout.strip():
            try:
                return parse_runner_output(stdout, self.family)
            except OutputParseError as e:
                logger.error(f"Error parsing {self.tool_name} failure results: {e}")

        return [self._execution_error(message)]

    def analyze_results(self, results: Sequence[TestResult]) -> RunAnalysis:
        """Aggregate results into a RunAnalysis."""
        return analyze_results(results)

    def generate_report(
        self,
        results: Sequence[TestResult],
        analysis: RunAnalysis,
        formats: Sequence[ReportFormat | str],
        output_path: str | Path,
        include_timestamp: bool = True
    ) -> list[Path]:
        """Write one report per format and return their paths."""
        return [
            self.reporter.generate_report(
                results,
                analysis,
                ReportOptions(format=fmt, output_path=output_path, include_timestamp=include_timestamp),
            )
            for fmt in formats
        ]

    async def _execute(self, argv: list[str]) -> tuple[int, str, str]:
        """Spawn the runner and wait for it; no timeout is imposed here."""
        process = await asyncio.create_subprocess_exec(
            *argv,
            cwd=str(self.project_root),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            stdin=asyncio.subprocess.DEVNULL,
            env={**os.environ, **TEST_ENV}
        )
        stdout_bytes, stderr_bytes = await process.communicate()

        return (
            process.returncode,
            stdout_bytes.decode("utf-8", errors="replace"),
            stderr_bytes.decode("utf-8", errors="replace"),
        )

    def _log_stderr(self, stderr: str) -> None:
        if stderr.strip():
            logger.warning(f"{self.tool_name} warnings: {stderr.strip()}")

    @staticmethod
    def _execution_error(message: str) -> TestResult:
        return TestResult(
            test_id=EXECUTION_ERROR_ID,
            passed=False,
            error=message,
            duration=0,
        )


class JestTestRunner(BaseTestRunner):
    """Runs ``jest --json``."""

    family = RunnerFamily.JEST
    tool_name = "Jest"
    default_command = JEST_COMMAND

    def build_options(self, options):
        flags = ["--json"]
        if options.get("coverage"):
            flags.append("--coverage")
        if options.get("watch"):
            flags.append("--watch")

        pattern = options.get("test_name_pattern") or options.get("testNamePattern")
        if pattern:
            flags.append(f"--testNamePattern={pattern}")

        return flags

    def _log_stderr(self, stderr):
        # Jest prints its human summary on stderr even on success
        if stderr.strip() and "passed" not in stderr:
            logger.warning(f"Jest warnings: {stderr.strip()}")


class PlaywrightTestRunner(BaseTestRunner):
    """Runs ``playwright test --reporter=json``."""

    family = RunnerFamily.PLAYWRIGHT
    tool_name = "Playwright"
    default_command = PLAYWRIGHT_COMMAND

    def build_options(self, options):
        flags = ["--reporter=json"]
        if options.get("headed"):
            flags.append("--headed")
        if options.get("workers"):
            flags.append(f"--workers={options['workers']}")
        if options.get("browser"):
            flags.append(f"--browser={options['browser']}")

        return flags


RUNNERS: dict[RunnerFamily, type[BaseTestRunner]] = {
    RunnerFamily.JEST: JestTestRunner,
    RunnerFamily.PLAYWRIGHT: PlaywrightTestRunner,
}


def create_runner(family: RunnerFamily, project_root: str | Path | None = None) -> BaseTestRunner:
    """Factory for the runner of a family."""
    return RUNNERS[family](project_root=project_root)
