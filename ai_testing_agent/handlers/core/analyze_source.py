"""MCP handler for analyze_source (delegates to AnalysisService)."""

from __future__ import annotations

from mcp.types import TextContent, Tool

from ...core.scanner import ParsedModule
from ...services import AnalysisService, ServiceResult

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="analyze_source",
    description=(
        "Scan a JavaScript/TypeScript file for imports, exports, functions, "
        "classes and interfaces. Best-effort regex scan, not a full parser."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Path to the .ts/.js/.tsx/.jsx file to scan"
            },
            "code": {
                "type": "string",
                "description": "Source code content (alternative to file_path)"
            }
        }
    }
)


# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict) -> list[TextContent]:
    """Scan 'code' or 'file_path' and return a readable summary."""
    service = AnalysisService()

    result = service.scan(
        code=arguments.get("code"),
        file_path=arguments.get("file_path")
    )

    if not result.success:
        return _error_response(result)

    return [TextContent(type="text", text=format_scan_result(result.data))]


# =============================================================================
# Response Formatting
# =============================================================================

def format_scan_result(module: ParsedModule) -> str:
    """Format scan result as readable text."""
    lines = [
        f"Scanned: {module.file_path}",
        f"Imports: {len(module.imports)}  Exports: {len(module.exports)}",
        "",
        f"Functions ({len(module.functions)}):",
    ]

    for func in module.functions:
        prefix = "export " if func.is_exported else ""
        prefix += "async " if func.is_async else ""
        returns = f": {func.return_type}" if func.return_type else ""
        lines.append(f"  - {prefix}{func.name}({', '.join(func.params)}){returns}")

    lines.append("")
    lines.append(f"Classes ({len(module.classes)}):")
    for cls in module.classes:
        extra = f" extends {cls.extends}" if cls.extends else ""
        if cls.implements:
            extra += f" implements {', '.join(cls.implements)}"
        lines.append(f"  - {cls.name}{extra}")

    if module.interfaces:
        lines.append("")
        lines.append(f"Interfaces: {', '.join(module.interfaces)}")

    return "\n".join(lines)


# =============================================================================
# Helpers
# =============================================================================

def _error_response(result: ServiceResult) -> list[TextContent]:
    """Render a failed ServiceResult as tool output."""
    return [TextContent(type="text", text=f"Error: {result.error.message}")]
