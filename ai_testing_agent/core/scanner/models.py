"""Data models for source scanning."""

from dataclasses import dataclass, field


@dataclass
class ParsedFunction:
    """A function declaration found in the source."""
    name: str
    params: list[str]
    body: str
    return_type: str | None = None
    is_async: bool = False
    is_exported: bool = False


@dataclass
class ParsedClass:
    """A class declaration found in the source."""
    name: str
    methods: list[ParsedFunction] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)
    extends: str | None = None
    implements: list[str] | None = None
    is_exported: bool = False


@dataclass
class ParsedModule:
    """Everything the scanner surfaced for one file."""
    file_path: str
    imports: list[str] = field(default_factory=list)
    exports: list[str] = field(default_factory=list)
    functions: list[ParsedFunction] = field(default_factory=list)
    classes: list[ParsedClass] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "file_path": self.file_path,
            "imports": self.imports,
            "exports": self.exports,
            "functions": [
                {
                    "name": f.name,
                    "params": f.params,
                    "return_type": f.return_type,
                    "is_async": f.is_async,
                    "is_exported": f.is_exported,
                }
                for f in self.functions
            ],
            "classes": [
                {
                    "name": c.name,
                    "extends": c.extends,
                    "implements": c.implements,
                    "is_exported": c.is_exported,
                }
                for c in self.classes
            ],
            "interfaces": self.interfaces,
        }
