"""Scanner - best-effort declaration scan of JS/TS source files."""

from .models import ParsedClass, ParsedFunction, ParsedModule
from .parser import parse_code, parse_directory, parse_file

__all__ = [
    "parse_code",
    "parse_file",
    "parse_directory",
    "ParsedModule",
    "ParsedFunction",
    "ParsedClass",
]
