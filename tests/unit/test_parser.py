"""
Tests for parsing and formatting single import statements.
"""

import pytest
from unbarrel.frontend.parser import format_import, to_executable_path
from unbarrel.shared.errors import MalformedStatementError
from unbarrel.shared.nodes import ImportSpecifier, NamedBinding, RawBinding
from unbarrel.shared.source_location import SourceLocation


class TestNamedImports:

    def test_named_symbols(self, parser):
        stmt = parser.parse("import { Foo, Bar } from './b';")
        assert stmt.is_named
        assert stmt.binding.names == ["Foo", "Bar"]
        assert stmt.destination == "./b"
        assert not stmt.is_type_only

    def test_type_only(self, parser):
        stmt = parser.parse("import type { Foo } from './a';")
        assert stmt.is_type_only
        assert stmt.binding.names == ["Foo"]

    def test_multiline_with_comments_and_trailing_comma(self, parser):
        text = "import {\n    Foo, // the foo\n    /* bar */ Bar,\n} from './b'"
        stmt = parser.parse(text)
        assert stmt.binding.names == ["Foo", "Bar"]
        assert stmt.text == text

    def test_alias_and_inline_type(self, parser):
        stmt = parser.parse("import { Foo as F, type Bar } from './b';")
        assert stmt.binding.specifiers == (
            ImportSpecifier("Foo", alias="F"),
            ImportSpecifier("Bar", is_type=True),
        )
        assert stmt.binding.names == ["Foo", "Bar"]

    def test_duplicate_names_collapse(self, parser):
        stmt = parser.parse("import { Foo, Foo } from './b';")
        assert stmt.binding.names == ["Foo"]

    def test_empty_braces(self, parser):
        stmt = parser.parse("import {} from './b';")
        assert stmt.binding == NamedBinding(())

    def test_location_is_attached(self, parser):
        loc = SourceLocation(file="app.ts", line=3, column=1)
        assert parser.parse("import { Foo } from './b';", loc).location == loc


class TestRawBindings:

    @pytest.mark.parametrize("text,binding", [
        ("import Foo from './foo';", "Foo"),
        ("import * as ns from './ns';", "* as ns"),
        ("import Foo, { Bar } from './foo';", "Foo, { Bar }"),
        ("import Foo, * as ns from './foo';", "Foo, * as ns"),
    ])
    def test_binding_kept_as_written(self, parser, text, binding):
        stmt = parser.parse(text)
        assert not stmt.is_named
        assert stmt.binding == RawBinding(binding)

    def test_type_only_default(self, parser):
        stmt = parser.parse("import type Foo from './foo';")
        assert stmt.is_type_only
        assert stmt.binding == RawBinding("Foo")


class TestMalformed:

    @pytest.mark.parametrize("text", [
        "import { Foo Bar } from './a';",
        "import { Foo } from \"./a\";",
        "import { Foo } './a';",
        "import from './a';",
        "import { Foo, } extra from './a';",
    ])
    def test_rejected(self, parser, text):
        with pytest.raises(MalformedStatementError) as exc_info:
            parser.parse(text)
        assert exc_info.value.statement == text
        assert exc_info.value.code == "E0001"

    def test_nested_import_word_is_rejected(self, parser):
        with pytest.raises(MalformedStatementError):
            parser.parse("import { import } from './a';")

    def test_names_containing_import_are_fine(self, parser):
        stmt = parser.parse("import { importer, reimport } from './a';")
        assert stmt.binding.names == ["importer", "reimport"]


class TestFormat:

    def test_ts_extension_becomes_js(self, parser):
        stmt = parser.parse("import { Foo } from './a.ts';")
        assert format_import(stmt) == "import { Foo } from './a.js';"

    def test_destination_override(self, parser):
        stmt = parser.parse("import { Foo } from './a';")
        assert format_import(stmt, destination="./a.ts") == "import { Foo } from './a.js';"

    def test_braces_only_for_named(self, parser):
        stmt = parser.parse("import * as ns from './ns';")
        assert format_import(stmt, destination="./ns.ts") == "import * as ns from './ns.js';"

    def test_type_prefix_and_alias_preserved(self, parser):
        stmt = parser.parse("import type { Foo as F } from './a';")
        assert format_import(stmt, destination="./a.ts") == "import type { Foo as F } from './a.js';"

    def test_multiline_is_normalised(self, parser):
        stmt = parser.parse("import {\n  Foo,\n  Bar\n} from './b.js';")
        assert format_import(stmt) == "import { Foo, Bar } from './b.js';"

    def test_binding_override(self, parser):
        stmt = parser.parse("import { Foo, Bar } from './b';")
        out = format_import(stmt, destination="./b/c.ts", binding=stmt.binding.select(["Bar"]))
        assert out == "import { Bar } from './b/c.js';"

    @pytest.mark.parametrize("path,expected", [
        ("./a.ts", "./a.js"),
        ("./a.js", "./a.js"),
        ("./a.tsx", "./a.tsx"),
        ("./a.ts.bak", "./a.ts.bak"),
        ("./a", "./a"),
    ])
    def test_to_executable_path(self, path, expected):
        assert to_executable_path(path) == expected
