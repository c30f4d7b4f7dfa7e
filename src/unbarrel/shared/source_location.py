"""
Source Location (Span)

Points a diagnostic at the import statement it is about.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a statement inside a file.

    - File, 1-based line and column, plus the byte offsets of the span
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0

    @classmethod
    def from_offset(cls, file: str, text: str, start: int, end: int = 0) -> "SourceLocation":
        """Build a location from character offsets into `text`."""
        line = text.count("\n", 0, start) + 1
        line_start = text.rfind("\n", 0, start) + 1
        return cls(file=file, line=line, column=start - line_start + 1, start=start, end=end or start)

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"
