"""
Source input for the services.

Tools accept either a path to a JavaScript/TypeScript file or the source
itself. CodeLoader turns both into LoadedCode and rejects bad input (wrong
extension, missing file, oversized source) with a ServiceResult failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..constants import MAX_CODE_SIZE, SOURCE_EXTENSIONS
from .base import ErrorCode, ServiceResult

INLINE_MODULE_NAME = "module"


@dataclass(frozen=True)
class LoadedCode:
    """Source text plus where it came from (``source_path`` is None for inline code)."""
    content: str
    module_name: str
    source_path: str | None = None


class CodeLoader:
    """Validate and read JS/TS source. A file path wins over inline code."""

    def __init__(
        self,
        max_size: int = MAX_CODE_SIZE,
        allowed_extensions: frozenset[str] = SOURCE_EXTENSIONS
    ):
        self._max_size = max_size
        self._allowed_extensions = allowed_extensions

    def load(
        self,
        code: str | None = None,
        file_path: str | None = None
    ) -> ServiceResult[LoadedCode]:
        if file_path:
            return self._read_file(Path(file_path), file_path)
        if code is not None:
            return self._accept(code, INLINE_MODULE_NAME, None)

        return ServiceResult.fail(
            ErrorCode.MISSING_INPUT,
            "Please provide either 'file_path' or 'code'"
        )

    def _read_file(self, path: Path, file_path: str) -> ServiceResult[LoadedCode]:
        if path.suffix not in self._allowed_extensions:
            shown = path.suffix or "no extension"
            return ServiceResult.fail(
                ErrorCode.INVALID_EXTENSION,
                f"Only JavaScript/TypeScript files allowed (got {shown})",
                details={"extension": path.suffix, "allowed": sorted(self._allowed_extensions)}
            )

        if not path.exists():
            return ServiceResult.fail(ErrorCode.FILE_NOT_FOUND, f"File not found: {file_path}")
        if not path.is_file():
            return ServiceResult.fail(ErrorCode.VALIDATION_ERROR, f"Path is not a file: {file_path}")

        try:
            content = path.read_text(encoding="utf-8")
        except PermissionError:
            return ServiceResult.fail(ErrorCode.PERMISSION_DENIED, f"Permission denied: {file_path}")
        except (OSError, UnicodeDecodeError) as e:
            return ServiceResult.fail(ErrorCode.INTERNAL_ERROR, f"Error reading file: {e}")

        return self._accept(content, path.stem, file_path)

    def _accept(
        self,
        content: str,
        module_name: str,
        source_path: str | None
    ) -> ServiceResult[LoadedCode]:
        size = len(content)
        if size > self._max_size:
            label = "Code" if source_path is None else "File"
            return ServiceResult.fail(
                ErrorCode.FILE_TOO_LARGE,
                f"{label} too large: {size:,} bytes (max: {self._max_size:,})",
                details={"size": size, "max_size": self._max_size}
            )

        return ServiceResult.ok(LoadedCode(content, module_name, source_path))
