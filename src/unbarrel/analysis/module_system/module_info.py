"""
Module System Types

Pure data structures describing barrels and resolved imports, with no
resolution logic of their own.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ...utils.config import SELF_REEXPORT_TARGET

# export { A } from './a';  export * from './b';  export type { C } from './c';
REEXPORT_PATTERN = re.compile(r"\bexport\b[^;]*?\bfrom\s+'(\.[^']*)'\s*;?")


@dataclass
class BarrelModule:
    """
    An `index.<ext>` file whose content is re-export declarations.

    - directory: the barrel's directory, relative to the importing file
    - path: absolute path of the index file
    - reexports: relative re-export targets in declaration order
    """
    directory: str
    path: Path
    reexports: List[str] = field(default_factory=list)

    @classmethod
    def from_source(cls, directory: str, path: Path, source: str) -> "BarrelModule":
        """Collect re-export targets, dropping the self reference `'./'`."""
        targets = [t for t in REEXPORT_PATTERN.findall(source) if t != SELF_REEXPORT_TARGET]
        return cls(directory=directory, path=path, reexports=targets)

    def __str__(self) -> str:
        return f"Barrel({self.path}, {len(self.reexports)} re-exports)"


@dataclass
class ResolvedImport:
    """Symbols found in one concrete file, with the import path to reach it."""
    destination: str
    names: List[str]

    def __repr__(self) -> str:
        return f"ResolvedImport(destination={self.destination!r}, names={self.names})"
