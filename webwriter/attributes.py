"""Rendering of attribute sets into ``name="value"`` pairs."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

from .escaping import escape_attribute_value

AttributePairs = Iterable[Tuple[str, Any]]
Attributes = Union[Mapping[str, Any], AttributePairs]

# Spellings that stand in for ``class``, which is a reserved word in Python.
CLASS_SYNONYMS = frozenset({"class-", "cssclass", "css-class"})


def css_class(value: str | None) -> dict[str, str | None]:
    """Return the attribute set for a single CSS class string."""

    return {"class": value}


def coerce_attributes(attributes: Attributes | str | None) -> Attributes | None:
    """Treat a bare string as a CSS class; pass anything else through."""

    if isinstance(attributes, str):
        return css_class(attributes)
    return attributes


def normalize_attribute_name(name: str) -> str:
    normalized = name.replace("_", "-").lower()
    if normalized in CLASS_SYNONYMS:
        return "class"
    return normalized


def _pairs(attributes: Attributes) -> AttributePairs:
    if isinstance(attributes, Mapping):
        return attributes.items()
    return attributes


def iter_attributes(attributes: Attributes | None) -> Iterator[Tuple[str, str]]:
    """Yield normalized names and escaped values in construction order."""

    if not attributes:
        return
    for name, value in _pairs(attributes):
        yield normalize_attribute_name(str(name)), escape_attribute_value(value)


def render_attributes(attributes: Attributes | str | None) -> str:
    """Render an attribute set as ``' name1="v1" name2="v2"'``.

    An empty or missing set renders as an empty string. ``None`` values
    render as ``""``.
    """

    pairs = iter_attributes(coerce_attributes(attributes))
    return "".join(f' {name}="{value}"' for name, value in pairs)


__all__ = [
    "Attributes",
    "CLASS_SYNONYMS",
    "coerce_attributes",
    "css_class",
    "iter_attributes",
    "normalize_attribute_name",
    "render_attributes",
]
