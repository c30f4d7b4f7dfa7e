"""
Import statement transformer
Converts the Lark parse tree of one statement into an ImportStatement
"""

import logging
import re
from typing import Any

from lark import Transformer, v_args
from lark.lexer import Token

from ..shared.nodes import ImportSpecifier, NamedBinding, RawBinding, ImportStatement
from ..shared.errors import MalformedStatementError

logger = logging.getLogger(__name__)

_IMPORT_WORD = re.compile(r"\bimport\b")


class _DefaultBinding:
    """Placeholder for a default/namespace binding until its raw text is sliced out."""


@v_args(inline=True)
class ImportTransformer(Transformer):
    """
    Builds the statement node.

    Default and namespace bindings are not decomposed: their text is sliced
    from the source between the `import`/`type` keyword and `from`, so the
    formatter can write them back exactly as authored.
    """

    def __init__(self, source: str):
        super().__init__()
        self.source = source

    def start(self, *children: Any) -> ImportStatement:
        tokens = [c for c in children if isinstance(c, Token)]
        by_type = {t.type: t for t in tokens}
        binding = next(c for c in children if not isinstance(c, Token))

        head = by_type.get("TYPE") or by_type["IMPORT"]
        from_kw = by_type["FROM"]
        binding_text = self.source[head.end_pos:from_kw.start_pos].strip()
        if _IMPORT_WORD.search(binding_text):
            # The statement pattern swallowed a neighbouring statement
            raise MalformedStatementError(
                "something is fishy with the import statement",
                statement=self.source,
                note="the binding clause contains another `import`",
            )

        if isinstance(binding, _DefaultBinding):
            binding = RawBinding(binding_text)

        return ImportStatement(
            text=self.source,
            binding=binding,
            destination=str(by_type["PATH"])[1:-1],
            is_type_only="TYPE" in by_type,
        )

    def named_imports(self, *specifiers: ImportSpecifier) -> NamedBinding:
        return NamedBinding(tuple(specifiers))

    def specifier(self, *tokens: Token) -> ImportSpecifier:
        names = [str(t) for t in tokens if t.type == "NAME"]
        return ImportSpecifier(
            name=names[0],
            alias=names[1] if len(names) > 1 else None,
            is_type=tokens[0].type == "TYPE",
        )

    def default_binding(self, *children: Any) -> _DefaultBinding:
        return _DefaultBinding()

    def namespace_import(self, name: Token) -> str:
        return f"* as {name}"
