"""Escaping rules for element text and attribute values."""

from __future__ import annotations

import html


def escape_text(text: object) -> str:
    """Escape text for use between tags.

    ``&``, ``<``, ``>`` and both quote characters are replaced by entities.
    ``None`` escapes to an empty string.
    """

    if text is None:
        return ""
    return html.escape(str(text), quote=True)


def escape_attribute_value(value: object) -> str:
    """Escape a value for use inside a double-quoted attribute."""

    if value is None:
        return ""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


__all__ = ["escape_attribute_value", "escape_text"]
