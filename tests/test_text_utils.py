"""Tests for text case transformations."""

from __future__ import annotations

import pytest

from core.text_utils import (
    TRANSFORMATIONS,
    EmptyInputError,
    to_camel_case,
    to_kebab_case,
    to_lowercase,
    to_snake_case,
    to_title_case,
    to_uppercase,
    transform_all,
)


def test_lower_and_upper():
    assert to_lowercase("Hello World") == "hello world"
    assert to_uppercase("Hello World") == "HELLO WORLD"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("hello WORLD foo-bar", "Hello World Foo-bar"),
        ("  leading space", "  Leading Space"),
    ],
)
def test_title_case(text, expected):
    assert to_title_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "helloWorld"),
        ("Hello World", "helloWorld"),
        ("the quick  brown fox", "theQuickBrownFox"),
        ("snake_case stays", "snake_caseStays"),
    ],
)
def test_camel_case(text, expected):
    assert to_camel_case(text) == expected


def test_snake_and_kebab_collapse_whitespace():
    assert to_snake_case("Hello World  Again") == "hello_world_again"
    assert to_kebab_case("Hello World  Again") == "hello-world-again"
    assert to_snake_case("a\tb\nc") == "a_b_c"


def test_transform_all_covers_every_transformation():
    results = transform_all("Hello World")
    assert list(results) == list(TRANSFORMATIONS)
    assert results == {
        "lowercase": "hello world",
        "uppercase": "HELLO WORLD",
        "titlecase": "Hello World",
        "camelcase": "helloWorld",
        "snakecase": "hello_world",
        "kebabcase": "hello-world",
    }


def test_labels():
    assert [label for label, _ in TRANSFORMATIONS.values()] == [
        "lowercase", "UPPERCASE", "Title Case", "camelCase", "snake_case", "kebab-case",
    ]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_transform_all_rejects_blank_input(text):
    with pytest.raises(EmptyInputError, match="Please enter some text"):
        transform_all(text)


def test_title_case_splits_on_unicode_spaces():
    assert to_title_case("hello\u00a0world") == "Hello\u00a0World"
    assert to_title_case("foo\u2003BAR") == "Foo\u2003Bar"
    # word heads are ASCII only
    assert to_title_case("élan vital") == "éLan Vital"
