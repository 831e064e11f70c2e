"""
Shared constants used across the project.
"""

from typing import Final

# Configuration
DEFAULT_CONFIG_FILENAME: Final[str] = ".ai-testing-agent.json"
DEFAULT_OUTPUT_PATH: Final[str] = "./output"

# Source files the scanner and code loader accept
SOURCE_EXTENSIONS: Final[frozenset[str]] = frozenset({
    ".ts", ".js", ".tsx", ".jsx"
})

# File constraints
MAX_CODE_SIZE: Final[int] = 1_000_000  # 1MB

# AI Configuration
DEFAULT_AI_MODEL: Final[str] = "gpt-4"
AI_TEMPERATURE: Final[float] = 0.3
AI_MAX_TOKENS: Final[int] = 2000
EMBEDDING_MODEL: Final[str] = "text-embedding-ada-002"

# Test execution
EXECUTION_ERROR_ID: Final[str] = "test-execution-error"
TEST_ENV: Final[dict[str, str]] = {"NODE_ENV": "test"}
JEST_COMMAND: Final[tuple[str, ...]] = ("npx", "jest")
PLAYWRIGHT_COMMAND: Final[tuple[str, ...]] = ("npx", "playwright", "test")

# Reporting
REPORT_BASENAME: Final[str] = "test-report"
JUNIT_SUITES_NAME: Final[str] = "AI Testing Agent Results"
JUNIT_SUITE_NAME: Final[str] = "TestSuite"
