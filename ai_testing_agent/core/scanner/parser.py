"""
Source Scanner - regex scan of JavaScript/TypeScript declarations.

This is not a parser. It finds the declarations an LLM prompt benefits from
(imports, exported names, plain ``function`` declarations, classes,
interfaces) and misses anything more elaborate: arrow functions, methods,
nested generics in parameter lists, braces inside strings.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from ...constants import SOURCE_EXTENSIONS
from ..errors import ScanError
from .models import ParsedClass, ParsedFunction, ParsedModule

logger = logging.getLogger(__name__)

IMPORT_RE = re.compile(r"""import\s+.*?from\s+['"].*?['"]""")
EXPORT_RE = re.compile(r"export\s+(?:const|function|class|interface|type|default)")
FUNCTION_RE = re.compile(
    r"(export\s+)?(async\s+)?function\s+(\w+)\s*\((.*?)\)(\s*:\s*(\w+))?\s*\{"
)
CLASS_RE = re.compile(
    r"(export\s+)?class\s+(\w+)(?:\s+extends\s+(\w+))?(?:\s+implements\s+([\w,\s]+?))?\s*\{"
)
INTERFACE_RE = re.compile(r"(?:export\s+)?interface\s+(\w+)")


def parse_file(file_path: str | Path) -> ParsedModule:
    """Read and scan one source file."""

    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error parsing file {file_path}: {e}")
        raise ScanError(f"Failed to parse file {file_path}: {e}") from e

    return parse_code(content, str(file_path))


def parse_directory(
    dir_path: str | Path,
    extensions: Iterable[str] = SOURCE_EXTENSIONS
) -> list[ParsedModule]:
    """Scan every matching file below a directory, in path order."""

    root = Path(dir_path)
    if not root.is_dir():
        raise ScanError(f"Failed to parse directory {dir_path}: not a directory")

    wanted = frozenset(extensions)
    return [
        parse_file(path)
        for path in sorted(root.rglob("*"))
        if path.is_file() and path.suffix in wanted
    ]


def parse_code(code: str, file_path: str) -> ParsedModule:
    """Scan source text for declarations."""

    return ParsedModule(
        file_path=file_path,
        imports=[m.group(0).strip() for m in IMPORT_RE.finditer(code)],
        exports=[m.group(0).strip() for m in EXPORT_RE.finditer(code)],
        functions=_extract_functions(code),
        classes=_extract_classes(code),
        interfaces=[m.group(1) for m in INTERFACE_RE.finditer(code)],
    )


def _extract_functions(code: str) -> list[ParsedFunction]:
    functions = []

    for match in FUNCTION_RE.finditer(code):
        params = [p.strip() for p in match.group(4).split(",") if p.strip()]

        functions.append(ParsedFunction(
            name=match.group(3),
            params=params,
            return_type=match.group(6),
            body=_extract_body(code, match.end()),
            is_async=bool(match.group(2)),
            is_exported=bool(match.group(1)),
        ))

    return functions


def _extract_classes(code: str) -> list[ParsedClass]:
    classes = []

    for match in CLASS_RE.finditer(code):
        implements = None
        if match.group(4):
            implements = [i.strip() for i in match.group(4).split(",") if i.strip()]

        # Members are left empty; the scanner does not look inside class bodies
        classes.append(ParsedClass(
            name=match.group(2),
            extends=match.group(3),
            implements=implements,
            is_exported=bool(match.group(1)),
        ))

    return classes


def _extract_body(code: str, start: int) -> str:
    """Text between an opening brace (just before ``start``) and its match."""
    depth = 1
    for index in range(start, len(code)):
        char = code[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return code[start:index]

    # Unbalanced braces
    return ""
