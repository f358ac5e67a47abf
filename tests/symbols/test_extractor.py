"""Tests for candidate type extraction."""

from __future__ import annotations

from promptgen.models import SourceFile
from promptgen.symbols.extractor import (
    TypeNameExtractor,
    extract_type_names,
    write_type_names,
)


def test_extracts_capitalised_words_sorted() -> None:
    text = "import Foundation\nclass MyClass {}\nstruct MyStruct {}\nenum MyEnum {}\n"

    assert extract_type_names(text) == ("MyClass", "MyEnum", "MyStruct")


def test_extracts_names_from_bracket_notation() -> None:
    text = "import UIKit\nlet array: [CustomType] = []\nvar lookup: [Key: Value?]\n"

    assert extract_type_names(text) == ("CustomType", "Key", "Value")


def test_returns_nothing_without_capitalised_words() -> None:
    assert extract_type_names("import foundation\nlet x = 5\n") == ()


def test_skips_keywords_and_single_letters() -> None:
    text = "func make<T>(value: T) -> Self where T: AnyObject {}\n"

    assert extract_type_names(text) == ()


def test_output_is_duplicate_free_and_stable() -> None:
    text = "let a: Order\nlet b: Order\nlet c: [Order]\nfunc f(_ o: Order?) -> Receipt\n"

    first = extract_type_names(text)
    second = extract_type_names(text)

    assert first == second == ("Order", "Receipt")


def test_instruction_comment_contributes_candidates() -> None:
    text = "// TODO: - Move parsing into FeedParser\n"

    assert "FeedParser" in extract_type_names(text)


def test_extractor_reads_source_file(repo_builder) -> None:
    repo_builder.write({"Cart.swift": "struct Cart { let items: [LineItem] }\n"})

    names = TypeNameExtractor().extract(SourceFile(repo_builder.path("Cart.swift")))

    assert names == ("Cart", "LineItem")


def test_type_list_format() -> None:
    assert write_type_names(["Cart", "LineItem"]) == "Cart\nLineItem\n"
