from __future__ import annotations

import pytest

from junit2md.domain.names import simplify_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("org.example.FooTest", "FooTest"),
        ("FooTest", "FooTest"),
        ("a.b", "b"),
        ("", ""),
        # Whitespace means a descriptive sentence, not a namespaced identifier.
        ("should parse 1.5 correctly", "should parse 1.5 correctly"),
        ("tab\tsep.Name", "tab\tsep.Name"),
        # Degenerate trailing separator.
        ("org.example.", "org.example."),
        (".", "."),
        (".hidden", "hidden"),
    ],
)
def test_simplify_name(name: str, expected: str) -> None:
    assert simplify_name(name) == expected


@pytest.mark.parametrize(
    "name",
    ["org.example.FooTest", "FooTest", "org.example.", "a..b", "x y.z", "..", "ü.ñ.名前"],
)
def test_simplify_name_is_idempotent(name: str) -> None:
    once = simplify_name(name)
    assert simplify_name(once) == once


def test_simplify_name_with_space_returns_input_unchanged() -> None:
    name = "com.example.Suite test.method"
    assert simplify_name(name) is name
