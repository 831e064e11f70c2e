"""Tool definitions and handlers served by the MCP server."""

from .analyze_source import TOOL_DEFINITION as ANALYZE_SOURCE_TOOL
from .analyze_source import handle as handle_analyze_source
from .generate_tests import TOOL_DEFINITION as GENERATE_TESTS_TOOL
from .generate_tests import handle as handle_generate_tests
from .run_tests import TOOL_DEFINITION as RUN_TESTS_TOOL
from .run_tests import handle as handle_run_tests

# Listing order as shown to clients
TOOLS = [
    ANALYZE_SOURCE_TOOL,
    GENERATE_TESTS_TOOL,
    RUN_TESTS_TOOL,
]

HANDLERS = {tool.name: handler for tool, handler in zip(TOOLS, (
    handle_analyze_source,
    handle_generate_tests,
    handle_run_tests,
))}

__all__ = [
    "TOOLS",
    "HANDLERS",
    "ANALYZE_SOURCE_TOOL",
    "GENERATE_TESTS_TOOL",
    "RUN_TESTS_TOOL",
    "handle_analyze_source",
    "handle_generate_tests",
    "handle_run_tests",
]
