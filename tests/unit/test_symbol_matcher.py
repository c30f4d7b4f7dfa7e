"""
Tests for the declaration heuristic used to locate symbols in candidate files.
"""

import pytest


class TestDeclarationKeywords:

    @pytest.mark.parametrize("source", [
        "export class Foo {}",
        "export type Foo = string;",
        "export enum Foo { A }",
        "export const Foo = 1;",
        "export let Foo = 1;",
        "export var Foo = 1;",
        "export interface Foo {}",
        "export abstract class Foo implements Bar {}",
    ])
    def test_recognised_declarations(self, symbol_matcher, source):
        assert symbol_matcher.find_declared(source, ["Foo"]) == ["Foo"]

    def test_generic_parameter_bracket(self, symbol_matcher):
        assert symbol_matcher.find_declared("export class Foo<T> {}", ["Foo"]) == ["Foo"]

    def test_newline_after_name(self, symbol_matcher):
        assert symbol_matcher.find_declared("export const Foo\n  = 1;", ["Foo"]) == ["Foo"]


class TestNonMatches:

    def test_function_declarations_are_not_recognised(self, symbol_matcher):
        assert symbol_matcher.find_declared("export function Foo() {}", ["Foo"]) == []

    def test_longer_identifier_does_not_match(self, symbol_matcher):
        assert symbol_matcher.find_declared("export const FooBar = 1;", ["Foo"]) == []

    def test_name_must_be_followed_by_space_or_bracket(self, symbol_matcher):
        assert symbol_matcher.find_declared("export interface Foo{}", ["Foo"]) == []

    def test_keyword_must_be_a_word(self, symbol_matcher):
        assert symbol_matcher.find_declared("subclass Foo ", ["Foo"]) == []

    def test_usage_is_not_a_declaration(self, symbol_matcher):
        assert symbol_matcher.find_declared("console.log(Foo);\n", ["Foo"]) == []

    def test_regex_characters_in_names_are_literal(self, symbol_matcher):
        assert symbol_matcher.find_declared("export const $store = 1;", ["$store"]) == ["$store"]
        assert symbol_matcher.find_declared("export const xstore = 1;", ["$store"]) == []


class TestSubset:

    def test_input_order_is_preserved(self, symbol_matcher):
        source = "export type Bar = 1;\nexport const Foo = 2;\n"
        assert symbol_matcher.find_declared(source, ["Foo", "Missing", "Bar"]) == ["Foo", "Bar"]

    def test_empty_request(self, symbol_matcher):
        assert symbol_matcher.find_declared("export const Foo = 1;", []) == []

    def test_commented_declaration_still_matches(self, symbol_matcher):
        # Textual heuristic: comments are not understood
        assert symbol_matcher.find_declared("// const Foo = 1;", ["Foo"]) == ["Foo"]
