"""
Module Path Resolution

Maps a relative import destination onto the file that actually exists on
disk, trying the authoring and executable extensions.

This class is stateless apart from the file store and can be shared/reused.
"""

import logging
import posixpath
import re
from pathlib import Path
from typing import List, Optional, Union

from ...utils.config import AUTHORING_EXTENSION, EXECUTABLE_EXTENSION, BARREL_STEM
from ...utils.io_utils import FileStore

logger = logging.getLogger(__name__)

_EXECUTABLE_SUFFIX = re.compile(re.escape(EXECUTABLE_EXTENSION) + r"$")


def join_relative(directory: str, target: str) -> str:
    """
    Join a re-export target onto a directory, keeping the result relative.

    join_relative('./b', './a')   -> 'b/a'
    join_relative('../b', './c/') -> '../b/c'
    """
    return posixpath.normpath(posixpath.join(directory, target))


def as_import_path(path: str) -> str:
    """Give a relative path the leading `./` an import destination needs."""
    if path.startswith("./") or path.startswith("../"):
        return path
    return f"./{path}"


class PathResolver:
    """
    Extension resolution for relative import destinations.

    Candidates are tried in a fixed order:
    - the stem as given           ./a.js  or  ./a
    - `.js` swapped for `.ts`     ./a.ts
    - `.ts` appended              ./a.ts
    - `.js` appended              ./a.js

    The first candidate that is a regular file wins. No match means the
    destination is probably a directory holding a barrel.
    """

    def __init__(self, file_store: Optional[FileStore] = None):
        self.file_store = file_store if file_store is not None else FileStore()

    def candidates(self, stem: str) -> List[str]:
        return [
            stem,
            _EXECUTABLE_SUFFIX.sub(AUTHORING_EXTENSION, stem),
            f"{stem}{AUTHORING_EXTENSION}",
            f"{stem}{EXECUTABLE_EXTENSION}",
        ]

    def resolve(self, base_dir: Union[Path, str], stem: str) -> Optional[str]:
        """
        Resolve `stem` (relative to `base_dir`) to an existing file.

        Returns:
            The matching candidate, still relative to `base_dir`, or None
        """
        base = Path(base_dir)
        for candidate in self.candidates(stem):
            if self.file_store.is_file(base / candidate):
                logger.debug(f"PathResolver: {stem} -> {candidate}")
                return candidate
        return None

    def find_barrel(self, base_dir: Union[Path, str], directory: str) -> Optional[str]:
        """
        Resolve `<directory>/index.ts` or `<directory>/index.js`, relative to
        `base_dir`. An extensionless `index` file is not a barrel.
        """
        base = Path(base_dir)
        for extension in (AUTHORING_EXTENSION, EXECUTABLE_EXTENSION):
            candidate = posixpath.join(directory, f"{BARREL_STEM}{extension}")
            if self.file_store.is_file(base / candidate):
                return candidate
        return None
