"""
Symbol Matching

Decides which requested symbols a candidate file declares. This is a
textual heuristic, not a parse: it does not check that the declaration is
top level or exported, and commented-out declarations still match.

This class is stateless and can be shared/reused.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Pattern

from ...utils.config import DECLARATION_KEYWORDS

logger = logging.getLogger(__name__)

_KEYWORDS = "|".join(DECLARATION_KEYWORDS)


@lru_cache(maxsize=1024)
def _declaration_pattern(symbol: str) -> Pattern[str]:
    """`class Foo `, `type Foo<`, `const Foo ` ... for one identifier."""
    return re.compile(rf"\b(?:{_KEYWORDS})\s+{re.escape(symbol)}[\s<]")


class SymbolMatcher:
    """Finds `class|type|enum|const|let|var|interface <Name>` declarations."""

    def find_declared(self, file_text: str, requested: Iterable[str]) -> List[str]:
        """
        Return the subset of `requested` declared in `file_text`.

        Input order is preserved; anything missing is left for the caller
        to look for elsewhere.
        """
        found = [symbol for symbol in requested if _declaration_pattern(symbol).search(file_text)]
        logger.debug(f"SymbolMatcher: found {found}")
        return found
