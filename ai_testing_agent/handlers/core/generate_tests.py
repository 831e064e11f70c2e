"""MCP handler for generate_tests (delegates to GenerationService)."""

from __future__ import annotations

from mcp.types import TextContent, Tool

from ...services import GenerationResult, GenerationService, ServiceResult
from .run_tests import format_test_results

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="generate_tests",
    description=(
        "Generate tests for a JavaScript/TypeScript file with an LLM, "
        "write the test file, run it with Jest or Playwright and summarize the results. "
        "Requires an OpenAI API key in the config file or OPENAI_API_KEY."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Path to the source file to generate tests for"
            },
            "framework": {
                "type": "string",
                "enum": ["jest", "mocha", "playwright", "cypress"],
                "description": "Test framework (default from config, usually jest)"
            },
            "type": {
                "type": "string",
                "enum": ["unit", "integration", "e2e", "performance"],
                "description": "Kind of tests to generate (default: unit)"
            },
            "test_path": {
                "type": "string",
                "description": "Where to write the generated test file (derived from file_path when omitted)"
            },
            "report_formats": {
                "type": "array",
                "items": {"type": "string", "enum": ["json", "xml"]},
                "description": "Report formats to write (default from config)"
            },
            "output_path": {
                "type": "string",
                "description": "Directory for report files"
            }
        },
        "required": ["file_path"]
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Generate, write and run tests for 'file_path' and return the summary text."""
    service = GenerationService()

    result = await service.generate_and_run(
        file_path=arguments.get("file_path"),
        framework=arguments.get("framework"),
        test_type=arguments.get("type"),
        test_path=arguments.get("test_path"),
        report_formats=arguments.get("report_formats"),
        output_path=arguments.get("output_path")
    )

    if not result.success:
        return _error_response(result)

    return [TextContent(type="text", text=format_generation_result(result.data))]


# =============================================================================
# Response Formatting
# =============================================================================

def format_generation_result(gen_result: GenerationResult) -> str:
    """Format generate-and-run result as readable text."""
    return "\n".join([
        f"Tests written to: {gen_result.test_path}",
        "",
        format_test_results(gen_result.analysis),
    ])


# =============================================================================
# Helpers
# =============================================================================

def _error_response(result: ServiceResult) -> list[TextContent]:
    """Render a failed ServiceResult as tool output."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
