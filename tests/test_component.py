import pytest
from pydantic import ValidationError

from motdtext.text.component import Component, Style, join_newlines


def test_literal_and_empty():
    assert Component.literal("hi").plain_text() == "hi"
    assert Component.literal(None) == Component.empty()
    assert Component.empty().is_empty()
    assert not Component.newline().is_empty()


def test_color_is_validated_and_normalized():
    assert Component(color="RED").color == "red"
    assert Component(color="Dark_Grey").color == "dark_gray"
    assert Component(color="#ABCDEF").color == "#abcdef"
    with pytest.raises(ValidationError):
        Component(color="#abc")


def test_styled_runs_inherit_and_override():
    tree = Component(
        color="blue",
        bold=True,
        extra=[
            Component(text="a"),
            Component(text="b", color="red", bold=False),
            Component(text="", extra=[Component(text="c", italic=True)]),
        ],
    )
    assert list(tree.iter_styled_runs()) == [
        ("a", Style(color="blue", bold=True)),
        ("b", Style(color="red")),
        ("c", Style(color="blue", bold=True, italic=True)),
    ]


def test_join_newlines_separates_components():
    joined = join_newlines([Component.literal("a"), Component.literal(""), Component.literal("b")])
    assert [c.text for c in joined.extra] == ["a", "\n", "", "\n", "b"]
    assert joined.plain_text() == "a\n\nb"


def test_join_newlines_single_and_none():
    assert join_newlines([Component.literal("x")]).plain_text() == "x"
    assert join_newlines([]).is_empty()
