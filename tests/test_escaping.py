import pytest

from webwriter.escaping import escape_attribute_value, escape_text


def test_escape_text_replaces_markup_characters() -> None:
    assert escape_text("a & b") == "a &amp; b"
    assert (
        escape_text('<p class="x">it\'s</p>')
        == "&lt;p class=&quot;x&quot;&gt;it&#x27;s&lt;/p&gt;"
    )


@pytest.mark.parametrize("value, expected", [(None, ""), ("", ""), (42, "42")])
def test_escape_text_is_total(value, expected) -> None:
    assert escape_text(value) == expected


def test_escape_text_twice_only_stable_without_escapable_characters() -> None:
    assert escape_text(escape_text("plain words")) == "plain words"
    assert escape_text(escape_text("&")) == "&amp;amp;"


def test_escape_attribute_value_keeps_greater_than() -> None:
    assert escape_attribute_value('say "hi" & <b>') == "say &quot;hi&quot; &amp; &lt;b>"


@pytest.mark.parametrize("value", ['"', 'a"b"c', "\"'\"", "&quot;\"", ""])
def test_escape_attribute_value_never_leaves_double_quote(value: str) -> None:
    assert '"' not in escape_attribute_value(value)


def test_escape_attribute_value_none_is_empty() -> None:
    assert escape_attribute_value(None) == ""
