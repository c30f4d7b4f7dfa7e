"""
Barrel Registry

The set of barrel files touched during a run. File transformations run on
several threads at once, so every insertion goes through a lock.
"""

import logging
import threading
from pathlib import Path
from typing import Iterator, List, Set, Union

logger = logging.getLogger(__name__)


class BarrelRegistry:
    """Thread-safe, deduplicated set of barrel paths scheduled for deletion."""

    def __init__(self):
        self._barrels: Set[Path] = set()
        self._lock = threading.Lock()

    def add(self, barrel_path: Union[Path, str]) -> bool:
        """Record a barrel; returns False if it was already recorded."""
        key = Path(barrel_path).resolve()
        with self._lock:
            if key in self._barrels:
                return False
            self._barrels.add(key)
        logger.debug(f"BarrelRegistry: scheduled {key} for deletion")
        return True

    def snapshot(self) -> List[Path]:
        """Sorted copy, safe to iterate while other threads keep adding."""
        with self._lock:
            return sorted(self._barrels)

    def __contains__(self, barrel_path: object) -> bool:
        if not isinstance(barrel_path, (Path, str)):
            return False
        key = Path(barrel_path).resolve()
        with self._lock:
            return key in self._barrels

    def __iter__(self) -> Iterator[Path]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._barrels)
