"""Service layer between the MCP handlers and the core pipeline."""

from .base import ErrorCode, ServiceError, ServiceResult
from .code_loader import CodeLoader, LoadedCode
from .analysis import AnalysisService
from .execution import ExecutionService
from .generation import GenerationResult, GenerationService

__all__ = [
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    "CodeLoader",
    "LoadedCode",
    "AnalysisService",
    "ExecutionService",
    "GenerationService",
    "GenerationResult",
]
