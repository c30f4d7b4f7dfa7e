"""
Parser

Parses and formats single import statements. Statements are first located
in a file by pattern (see compiler.file_transformer); only the located
statement text is handed to the Lark grammar.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError

from .transformer import ImportTransformer
from ..shared.nodes import Binding, ImportStatement
from ..shared.errors import MalformedStatementError, UnbarrelError
from ..shared.source_location import SourceLocation
from ..utils.config import AUTHORING_EXTENSION, EXECUTABLE_EXTENSION

logger = logging.getLogger("unbarrel.frontend.parser")

_AUTHORING_SUFFIX = re.compile(re.escape(AUTHORING_EXTENSION) + r"$")


class ImportParser:
    """
    Import statement parser.

    - Takes the text of one statement, returns an ImportStatement
    - Raises MalformedStatementError for anything that is not
      `import [type ]<binding> from '<path>';`

    The Lark instance is built once and is safe to share between threads;
    a fresh transformer is created per statement.
    """

    def __init__(self):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            grammar_path,
            start='start',
            parser='lalr',
            maybe_placeholders=False,
        )

    def parse(self, text: str, location: Optional[SourceLocation] = None) -> ImportStatement:
        try:
            tree = self.parser.parse(text)
            statement = ImportTransformer(text).transform(tree)
        except UnexpectedInput as e:
            detail = str(e).strip().splitlines()[0] if str(e).strip() else type(e).__name__
            raise MalformedStatementError(
                "something is fishy with the import statement",
                statement=text,
                note=detail,
            ) from e
        except VisitError as e:
            if isinstance(e.orig_exc, UnbarrelError):
                raise e.orig_exc from None
            raise
        return statement.with_location(location)


def to_executable_path(destination: str) -> str:
    """`./a.ts` -> `./a.js`; other paths are returned unchanged."""
    return _AUTHORING_SUFFIX.sub(EXECUTABLE_EXTENSION, destination)


def format_import(
    statement: ImportStatement,
    destination: Optional[str] = None,
    binding: Optional[Binding] = None,
) -> str:
    """
    Render `import [type ]<binding> from '<path>';`.

    `destination` and `binding` default to the statement's own; the path's
    authoring extension is always normalised to the executable one.
    """
    path = to_executable_path(destination if destination is not None else statement.destination)
    type_prefix = "type " if statement.is_type_only else ""
    return f"import {type_prefix}{binding if binding is not None else statement.binding} from '{path}';"
