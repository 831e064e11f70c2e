"""
Analysis Service - declaration scan of source code.

Wraps the scanner with input validation via CodeLoader and returns the
existing ParsedModule model.
"""

from __future__ import annotations

from ..core.scanner import ParsedModule, parse_code
from .base import ServiceResult
from .code_loader import CodeLoader


class AnalysisService:
    """Scan JavaScript/TypeScript code for functions, classes and interfaces."""

    def __init__(self, code_loader: CodeLoader | None = None):
        self._loader = code_loader or CodeLoader()

    def scan(
        self,
        code: str | None = None,
        file_path: str | None = None
    ) -> ServiceResult[ParsedModule]:
        """
        Scan source from a file or an inline string.

        Example:
            service = AnalysisService()
            result = service.scan(code="export function add(a, b) { return a + b; }")
            if result.success:
                print([f.name for f in result.data.functions])
        """
        load_result = self._loader.load(code=code, file_path=file_path)

        if not load_result.success:
            return ServiceResult.fail(
                load_result.error.code,
                load_result.error.message,
                load_result.error.details
            )

        loaded = load_result.data
        return ServiceResult.ok(parse_code(loaded.content, loaded.source_path or loaded.module_name))
