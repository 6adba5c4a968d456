"""Convenience operations built from the DocumentWriter primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, TypeVar

from .errors import UnsupportedDependencyError
from .io_utils import LineSource, open_line_source, strip_line_ending

if TYPE_CHECKING:  # pragma: no cover
    from .attributes import Attributes
    from .config import WriterOptions

T = TypeVar("T")

# (suffix, tag, attribute builder)
DEPENDENCY_KINDS = (
    (".js", "script", lambda url: {"src": url, "type": "text/javascript"}),
    (".ico", "link", lambda url: {"rel": "shortcut icon", "type": "image/x-icon", "href": url}),
    (".css", "link", lambda url: {"rel": "stylesheet", "type": "text/css", "href": url}),
)


class HelperMixin:
    """Loops, table rows, asset links and file passthrough.

    Mixed into :class:`~webwriter.writer.DocumentWriter`. None of these touch
    the indentation counter directly.
    """

    options: "WriterOptions"

    def for_each(
        self,
        items: Iterable[T],
        callback: Callable[[T], Any],
        tag: Optional[str] = None,
        attributes: "Attributes | str | None" = None,
    ) -> None:
        """Call ``callback`` for each item, inside a ``tag`` container if given."""

        if tag is None:
            for item in items:
                callback(item)
            return
        with self.open_tag(tag, attributes):
            for item in items:
                callback(item)

    def write_for_each(
        self,
        tag: str,
        items: Iterable[T],
        text: Callable[[T], Optional[str]],
        attributes: "Attributes | str | None" = None,
    ) -> None:
        """Write one leaf element per item, its content produced by ``text``."""

        for item in items:
            self.write_tag(tag, text(item), attributes)

    def table_row(self, *cells: Any) -> None:
        """Write a ``tr`` with one ``td`` per cell; ``None`` gives an empty cell."""

        def write_cell(cell: Any) -> None:
            with self.open_tag("td"):
                if cell is not None:
                    self.write_text(str(cell))

        self.for_each(cells, write_cell, tag="tr")

    def dependency(self, url: Optional[str]) -> None:
        """Link a script, icon or stylesheet, chosen by the URL's extension.

        Blank URLs are ignored. Only the literal end of the URL is inspected,
        so ``app.js?v=2`` is not recognised.
        """

        if url is None or not url.strip():
            return
        trimmed = url.rstrip()
        for suffix, tag, build in DEPENDENCY_KINDS:
            if trimmed.endswith(suffix):
                self.write_tag(tag, None, build(url))
                return
        raise UnsupportedDependencyError(
            f"File extension not supported for {url!r}; use write_tag instead"
        )

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write lines verbatim, without escaping or indentation."""

        for line in lines:
            self._emit(strip_line_ending(line) + "\n")

    def write_file_contents(self, source: LineSource) -> None:
        """Copy a file, byte stream, text stream or iterable of lines into the output."""

        with open_line_source(source, self.options) as lines:
            self.write_lines(lines)


__all__ = ["DEPENDENCY_KINDS", "HelperMixin"]
