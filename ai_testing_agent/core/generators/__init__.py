"""Generators - LLM-driven test case synthesis."""

from .ai import FRAMEWORK_EXAMPLES, AITestGenerator

__all__ = [
    "AITestGenerator",
    "FRAMEWORK_EXAMPLES",
]
