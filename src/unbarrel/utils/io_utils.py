"""
Centralized file I/O utilities.

- Single place for encoding and path handling
- Use Path.read_text() consistently (no raw open/read)
- FileStore keeps one copy of each source per run so every reader sees
  the on-disk content as it was before any rewrite
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Union

from .config import DEFAULT_FILE_ENCODING

logger = logging.getLogger(__name__)


def read_source_file(path: Union[Path, str]) -> str:
    """Read source file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=DEFAULT_FILE_ENCODING)


def write_source_file(path: Union[Path, str], content: str) -> None:
    """Write source file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    p.write_text(content, encoding=DEFAULT_FILE_ENCODING)


class FileStore:
    """
    Read/write access to the local filesystem for one rewrite run.

    Reads are cached by resolved path, so the first read of a file pins its
    original content for the rest of the run. Writes go straight to disk and
    do not refresh the cache.
    """

    def __init__(self):
        self._cache: Dict[Path, str] = {}
        self._lock = threading.Lock()

    def read(self, path: Union[Path, str]) -> str:
        key = Path(path).resolve()
        with self._lock:
            if key in self._cache:
                return self._cache[key]
        content = read_source_file(key)
        with self._lock:
            # Another thread may have raced us; keep the first copy
            return self._cache.setdefault(key, content)

    def write(self, path: Union[Path, str], content: str) -> None:
        write_source_file(path, content)

    def exists(self, path: Union[Path, str]) -> bool:
        return Path(path).exists()

    def is_file(self, path: Union[Path, str]) -> bool:
        return Path(path).is_file()

    def delete(self, path: Union[Path, str]) -> None:
        Path(path).unlink()
        logger.debug(f"Deleted {path}")

    def clear_cache(self) -> None:
        """Forget cached contents (used between runs)."""
        with self._lock:
            self._cache.clear()
