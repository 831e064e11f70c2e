"""Write rendered test reports to disk."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from ...constants import REPORT_BASENAME
from ..errors import ReportGenerationError
from ..types import ReportFormat
from .renderers import get_renderer

if TYPE_CHECKING:
    from ..runner.models import RunAnalysis, TestResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportOptions:
    """Where and how to write one report."""
    format: ReportFormat | str
    output_path: str | Path
    filename: str | None = None
    include_timestamp: bool = True


class TestReporter:
    """Render results in a given format and write them under an output directory."""
    __test__ = False

    def generate_report(
        self,
        results: Sequence[TestResult],
        analysis: RunAnalysis,
        options: ReportOptions,
        now: datetime | None = None
    ) -> Path:
        """
        Write one report file and return its path.

        Args:
            results: Normalized results of the run
            analysis: Aggregate produced by analyze_results
            options: Format, directory and naming
            now: Report time (defaults to current UTC time)

        Returns:
            Path of the written file

        Raises:
            UnsupportedReportFormatError: Before anything touches the disk
            ReportGenerationError: If the directory or file cannot be written
        """
        # Validate the format before any side effect
        renderer = get_renderer(options.format)

        timestamp = iso_timestamp(now or datetime.now(timezone.utc))
        content = renderer.render(results, analysis, timestamp)

        output_dir = Path(options.output_path)
        if options.filename:
            filename = options.filename
        else:
            suffix = f"-{timestamp.replace(':', '-')}" if options.include_timestamp else ""
            filename = f"{REPORT_BASENAME}{suffix}.{renderer.extension}"
        file_path = output_dir / filename

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error writing report to {file_path}", exc_info=True)
            raise ReportGenerationError(f"Failed to generate report: {e}") from e

        logger.info(f"Test report generated at {file_path}")
        return file_path


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
