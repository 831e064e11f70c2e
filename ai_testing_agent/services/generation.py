"""
Generation Service - Business logic for the generate-and-run pipeline.

Orchestrates:
1. Validate the source input via CodeLoader
2. Generate a test file with the LLM (TestManager)
3. Run it and optionally write reports

The core RunAnalysis is returned unchanged, paired with the test file path.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core import (
    AgentError,
    ReportingOptions,
    RunAnalysis,
    TestManager,
    TestType,
    default_test_path,
)
from .base import ErrorCode, ServiceResult
from .code_loader import CodeLoader
from .execution import validate_run_inputs


@dataclass(frozen=True)
class GenerationResult:
    """
    Result of one generate-and-run call.

    Attributes:
        analysis: Summary of the generated tests' run
        test_path: Where the generated test file was written
    """
    analysis: RunAnalysis
    test_path: str


class GenerationService:
    """Generate tests for a source file, run them and summarize."""

    def __init__(
        self,
        test_manager: TestManager | None = None,
        code_loader: CodeLoader | None = None,
        config_path: str | None = None
    ):
        self._manager = test_manager
        self._loader = code_loader or CodeLoader()
        self._config_path = config_path

    async def generate_and_run(
        self,
        file_path: str | None,
        framework: str | None = None,
        test_type: str | None = None,
        test_path: str | None = None,
        report_formats: list[str] | None = None,
        output_path: str | None = None
    ) -> ServiceResult[GenerationResult]:
        """
        Run the full pipeline for ``file_path``.

        Args:
            file_path: Source file to generate tests for
            framework: Test framework (config default if None)
            test_type: unit, integration, e2e or performance
            test_path: Where to write the test file (derived if None)
            report_formats: Report formats to write (config default if None)
            output_path: Report directory (config default if None)
        """
        # Step 1: Validate inputs
        if not file_path:
            return ServiceResult.fail(
                ErrorCode.MISSING_INPUT,
                "'file_path' is required and cannot be empty"
            )

        load_result = self._loader.load(file_path=file_path)
        if not load_result.success:
            return ServiceResult.fail(
                load_result.error.code,
                load_result.error.message,
                load_result.error.details
            )

        target = test_path or str(default_test_path(file_path))
        validation_error = validate_run_inputs(target, framework, report_formats)
        if validation_error:
            return validation_error

        if test_type:
            try:
                TestType(test_type)
            except ValueError:
                return ServiceResult.fail(
                    ErrorCode.VALIDATION_ERROR,
                    f"Unknown test type: {test_type}",
                    details={"allowed": [t.value for t in TestType]}
                )

        # Step 2: Run the pipeline
        overrides = {"framework": framework, "type": test_type, "test_path": target}

        try:
            manager = await self._get_manager()

            if report_formats is not None or output_path:
                defaults = manager.config.test_defaults.reporting
                overrides["reporting"] = ReportingOptions(
                    formats=defaults.formats if report_formats is None else report_formats,
                    output_path=output_path or manager.config.output_path,
                    include_timestamp=defaults.include_timestamp,
                )

            analysis = await manager.generate_and_run_tests(file_path, **overrides)
        except AgentError as e:
            return ServiceResult.from_exception(e)

        return ServiceResult.ok(GenerationResult(analysis=analysis, test_path=target))

    async def _get_manager(self) -> TestManager:
        if self._manager is None:
            from .. import initialize_agent

            context = await initialize_agent(self._config_path)
            self._manager = context.test_manager
        return self._manager
