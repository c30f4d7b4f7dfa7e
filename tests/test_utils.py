"""
Test utilities for the unbarrel test suite.

Helpers to lay out small TypeScript source trees on disk and read them back.
"""

from pathlib import Path
from typing import Dict


# A barrel `b/` re-exporting a const from a.ts and a type from c.ts
SIMPLE_BARREL_TREE = {
    "b/index.ts": "export * from './a';\nexport * from './c';\n",
    "b/a.ts": "export const Foo = 1;\n",
    "b/c.ts": "export type Bar = string;\n",
}


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create `files` (relative path -> content) under `root`."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def read_tree(root: Path) -> Dict[str, str]:
    """Every file under `root`, keyed by its posix path relative to `root`."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
