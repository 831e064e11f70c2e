"""Test execution service.

Runs an existing Jest/Playwright test file and returns its RunAnalysis in a
ServiceResult.
"""


from __future__ import annotations

from typing import Any

from ..core import AgentError, RunAnalysis, TestFramework, TestManager
from ..core.reporting import get_renderer
from .base import ErrorCode, ServiceResult


class ExecutionService:
    """Run existing tests through the TestManager."""

    def __init__(
        self,
        test_manager: TestManager | None = None,
        config_path: str | None = None
    ):
        """
        Args:
            test_manager: Manager to use (built from configuration if None)
            config_path: Config file used when building the manager
        """
        self._manager = test_manager
        self._config_path = config_path

    async def run(
        self,
        test_path: str | None,
        framework: str | None = None,
        options: dict[str, Any] | None = None,
        report_formats: list[str] | None = None,
        output_path: str | None = None
    ) -> ServiceResult[RunAnalysis]:
        """Run the tests at ``test_path`` and optionally write reports."""

        # Step 1: Validate inputs
        validation_error = validate_run_inputs(test_path, framework, report_formats)
        if validation_error:
            return validation_error

        # Step 2: Run
        try:
            manager = await self._get_manager()
            analysis = await manager.run_existing_tests(
                test_path,
                framework=framework,
                options=options,
                report_formats=report_formats,
                output_path=output_path,
            )
        except AgentError as e:
            return ServiceResult.from_exception(e)

        return ServiceResult.ok(analysis)

    async def _get_manager(self) -> TestManager:
        if self._manager is None:
            from .. import initialize_agent

            context = await initialize_agent(self._config_path)
            self._manager = context.test_manager
        return self._manager


def validate_run_inputs(
    test_path: str | None,
    framework: str | None,
    report_formats: list[str] | None
) -> ServiceResult | None:
    """Return a failed result for bad inputs, None when they are usable."""

    if not test_path or not str(test_path).strip():
        return ServiceResult.fail(
            ErrorCode.MISSING_INPUT,
            "'test_path' is required and cannot be empty"
        )

    if framework:
        try:
            TestFramework(framework)
        except ValueError:
            return ServiceResult.fail(
                ErrorCode.VALIDATION_ERROR,
                f"Unknown framework: {framework}",
                details={"allowed": [f.value for f in TestFramework]}
            )

    for fmt in report_formats or []:
        try:
            get_renderer(fmt)
        except AgentError as e:
            return ServiceResult.from_exception(e)

    return None
