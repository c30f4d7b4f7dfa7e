"""
Import statement nodes

Pure data produced by the statement parser and consumed by the resolver and
the formatter. Nodes are immutable; rewriting builds new statements.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple, Union

from .source_location import SourceLocation


@dataclass(frozen=True)
class ImportSpecifier:
    """One entry of a braced import list: `A`, `A as B` or `type A`."""
    name: str
    alias: Optional[str] = None
    is_type: bool = False

    def __str__(self) -> str:
        text = f"type {self.name}" if self.is_type else self.name
        if self.alias:
            text = f"{text} as {self.alias}"
        return text


@dataclass(frozen=True)
class NamedBinding:
    """`{ A, B as C }`"""
    specifiers: Tuple[ImportSpecifier, ...] = ()

    @property
    def names(self) -> List[str]:
        """Imported symbol names, in order, without duplicates."""
        seen = []
        for spec in self.specifiers:
            if spec.name not in seen:
                seen.append(spec.name)
        return seen

    def select(self, names: List[str]) -> "NamedBinding":
        """Keep only the specifiers importing one of `names`."""
        return NamedBinding(tuple(s for s in self.specifiers if s.name in names))

    def __str__(self) -> str:
        if not self.specifiers:
            return "{}"
        return "{ " + ", ".join(str(s) for s in self.specifiers) + " }"


@dataclass(frozen=True)
class RawBinding:
    """Namespace or default binding kept as written (`Foo`, `* as ns`, `Foo, { A }`)."""
    text: str

    def __str__(self) -> str:
        return self.text


Binding = Union[NamedBinding, RawBinding]


@dataclass(frozen=True)
class ImportStatement:
    """
    A parsed `import [type ]<binding> from '<destination>';` statement.

    `text` is the statement exactly as it appears in the source file so the
    file transformer can find and replace it.
    """
    text: str
    binding: Binding
    destination: str
    is_type_only: bool = False
    location: Optional[SourceLocation] = field(default=None, compare=False)

    @property
    def is_named(self) -> bool:
        return isinstance(self.binding, NamedBinding)

    @property
    def is_relative(self) -> bool:
        return self.destination.startswith(".")

    def with_location(self, location: Optional[SourceLocation]) -> "ImportStatement":
        return replace(self, location=location)
