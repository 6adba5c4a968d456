import pytest

from webwriter.attributes import (
    coerce_attributes,
    css_class,
    iter_attributes,
    normalize_attribute_name,
    render_attributes,
)


def test_render_keeps_construction_order() -> None:
    assert render_attributes({"b": 1, "a": 2}) == ' b="1" a="2"'


def test_render_replaces_underscores_with_hyphens() -> None:
    assert render_attributes({"href": "/a", "data_id": 3}) == ' href="/a" data-id="3"'


@pytest.mark.parametrize("name", ["class", "class_", "cssclass", "css_class", "CssClass"])
def test_class_synonyms_render_as_class(name: str) -> None:
    assert render_attributes({name: "nav"}) == ' class="nav"'


def test_none_value_renders_empty() -> None:
    assert render_attributes({"alt": None}) == ' alt=""'


@pytest.mark.parametrize("attributes", [None, {}, []])
def test_empty_sets_render_nothing(attributes) -> None:
    assert render_attributes(attributes) == ""


def test_string_is_css_class_shorthand() -> None:
    assert render_attributes("menu main") == ' class="menu main"'
    assert coerce_attributes("menu") == {"class": "menu"}
    assert css_class("menu") == {"class": "menu"}


def test_pairs_are_accepted() -> None:
    pairs = [("rel", "stylesheet"), ("href", "site.css")]
    assert render_attributes(pairs) == ' rel="stylesheet" href="site.css"'


def test_values_are_escaped() -> None:
    assert render_attributes({"title": 'a "b" & c'}) == ' title="a &quot;b&quot; &amp; c"'


def test_iter_attributes_yields_one_pair_per_entry() -> None:
    pairs = list(iter_attributes({"data_x": 1, "class_": "y", "id": None}))
    assert pairs == [("data-x", "1"), ("class", "y"), ("id", "")]


def test_normalize_lowercases() -> None:
    assert normalize_attribute_name("Aria_Label") == "aria-label"
