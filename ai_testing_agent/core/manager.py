"""
Test Manager - the end-to-end pipeline.

generate_and_run_tests:
    scan -> generate cases -> render code -> write file -> run -> analyze -> report

run_existing_tests:
    pick framework -> run -> analyze -> report
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .agents import AgentManager
from .errors import AgentError, PipelineError
from .generators import AITestGenerator
from .runner import BaseTestRunner, RunAnalysis, create_runner
from .types import (
    ReportFormat,
    ReportingOptions,
    TestConfig,
    TestFramework,
    TestType,
    runner_family_for,
)

if TYPE_CHECKING:
    from ..config import Config

logger = logging.getLogger(__name__)


class TestManager:
    """Runs the generate/execute/report pipeline for one file at a time."""
    __test__ = False

    def __init__(
        self,
        agent_manager: AgentManager,
        config: Config,
        project_root: str | Path | None = None
    ):
        self.agent_manager = agent_manager
        self.config = config
        self.project_root = project_root

    async def generate_and_run_tests(
        self,
        source_path: str | Path,
        **overrides: Any
    ) -> RunAnalysis:
        """
        Generate a test file for ``source_path`` with the LLM, run it and report.

        Args:
            source_path: Source file to test
            **overrides: TestConfig fields (type, framework, test_path,
                coverage, max_retries, timeout, reporting)

        Returns:
            RunAnalysis of the generated tests

        Raises:
            PipelineError: If any stage fails
        """
        source_path = self.resolve_path(source_path)
        logger.info(f"Generating and running tests for {source_path}")

        try:
            test_config = self.build_test_config(source_path, **overrides)

            generator = AITestGenerator(self.agent_manager.get_default_agent())

            analysis = generator.analyze_code(test_config.source_path)
            test_cases = await generator.generate_test_cases(analysis, test_config)
            test_code = await generator.convert_to_test_code(test_cases, test_config.framework)

            test_path = self.resolve_path(test_config.test_path)
            test_path.parent.mkdir(parents=True, exist_ok=True)
            test_path.write_text(test_code, encoding="utf-8")
            logger.info(f"Test file written to {test_path}")

            runner = self.get_test_runner(test_config.framework)
            results = await runner.run_tests(test_path)
            run_analysis = runner.analyze_results(results)

            reporting = test_config.reporting
            if reporting and reporting.formats:
                runner.generate_report(
                    results,
                    run_analysis,
                    reporting.formats,
                    reporting.output_path or self.config.output_path,
                    reporting.include_timestamp,
                )

            return run_analysis

        except (AgentError, OSError, ValueError) as e:
            logger.error("Error generating and running tests", exc_info=True)
            raise PipelineError(f"Failed to generate and run tests: {e}") from e

    async def run_existing_tests(
        self,
        test_path: str | Path,
        framework: TestFramework | str | None = None,
        options: dict[str, Any] | None = None,
        report_formats: Sequence[ReportFormat | str] | None = None,
        output_path: str | Path | None = None
    ) -> RunAnalysis:
        """
        Run an existing test file.

        An explicit ``framework`` wins; otherwise the file content is sniffed.
        A relative ``test_path`` is taken from ``project_root``.

        Raises:
            PipelineError: If running, decoding or reporting fails
        """
        test_path = self.resolve_path(test_path)
        logger.info(f"Running existing tests at {test_path}")

        try:
            selected = TestFramework(framework) if framework else self.detect_framework(test_path)

            runner = self.get_test_runner(selected)
            results = await runner.run_tests(test_path, options)
            run_analysis = runner.analyze_results(results)

            if report_formats:
                runner.generate_report(
                    results,
                    run_analysis,
                    list(report_formats),
                    output_path or self.config.output_path,
                    self.config.test_defaults.reporting.include_timestamp,
                )

            return run_analysis

        except (AgentError, ValueError) as e:
            logger.error("Error running existing tests", exc_info=True)
            raise PipelineError(f"Failed to run existing tests: {e}") from e

    def build_test_config(self, source_path: str | Path, **overrides: Any) -> TestConfig:
        """Merge per-call overrides with the configured test defaults."""
        defaults = self.config.test_defaults
        framework = TestFramework(overrides.get("framework") or defaults.framework)

        reporting = overrides.get("reporting") or ReportingOptions(
            formats=defaults.reporting.formats,
            output_path=self.config.output_path,
            include_timestamp=defaults.reporting.include_timestamp,
        )

        return TestConfig(
            type=overrides.get("type") or TestType.UNIT,
            framework=framework,
            source_path=str(source_path),
            test_path=str(overrides.get("test_path") or default_test_path(source_path)),
            coverage=overrides.get("coverage", defaults.coverage),
            max_retries=overrides.get("max_retries", defaults.max_retries),
            timeout=overrides.get("timeout", defaults.timeout),
            reporting=reporting,
        )

    def resolve_path(self, path: str | Path) -> Path:
        """Anchor a relative path at ``project_root``, the runner's working directory."""
        path = Path(path)
        if self.project_root is None or path.is_absolute():
            return path
        return Path(self.project_root).resolve() / path

    def get_test_runner(self, framework: TestFramework | str) -> BaseTestRunner:
        return create_runner(runner_family_for(framework), project_root=self.project_root)

    def detect_framework(self, test_path: str | Path) -> TestFramework:
        """Guess the framework from the test file's content (Jest if unsure)."""
        try:
            content = Path(test_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {test_path} to detect framework ({e}), using jest")
            return TestFramework.JEST

        return detect_framework_from_content(content)


def detect_framework_from_content(content: str) -> TestFramework:
    """
    Best-effort content sniffing.

    Files mixing several frameworks' idioms can be misclassified; callers that
    know the framework should pass it explicitly.
    """
    if "describe" in content and "test(" in content and "expect(" in content:
        return TestFramework.JEST
    if "describe" in content and "it(" in content and "expect(" in content:
        return TestFramework.MOCHA
    if "test.describe" in content or "page.goto" in content:
        return TestFramework.PLAYWRIGHT
    if "cy.visit" in content or "cy.get" in content:
        return TestFramework.CYPRESS

    return TestFramework.JEST


def default_test_path(source_path: str | Path) -> Path:
    """
    Conventional test file location for a source file.

    ``<root>/src/x/calc.ts`` -> ``<root>/test/x/calc.test.ts``; outside a
    ``src`` tree the test goes to a sibling ``__tests__`` directory.
    """
    source = Path(source_path)
    directory = str(source.parent)

    if "src" in directory:
        test_dir = Path(directory.replace("src", "test", 1))
    else:
        test_dir = source.parent / "__tests__"

    suffix = source.suffix.replace(".", ".test.", 1) if source.suffix else ".test"
    return test_dir / f"{source.stem}{suffix}"
