"""Streaming, indenting markup writer."""

from __future__ import annotations

from typing import Any, BinaryIO, Optional, Protocol

from .attributes import Attributes, render_attributes
from .closer import ScopedCloser
from .config import DEFAULT_OPTIONS, WriterOptions
from .errors import UnbalancedTagError
from .escaping import escape_text
from .helpers import HelperMixin
from .io_utils import PathLike, is_binary_stream, is_path, open_file_sink, warn, wrap_binary


class Sink(Protocol):
    """Text destination the writer appends to."""

    def write(self, text: str) -> Any: ...

    def flush(self) -> Any: ...

    def close(self) -> Any: ...


class DocumentWriter(HelperMixin):
    """Writes markup straight to a sink, one indented line per call.

    Nothing is buffered beyond what the sink itself does. Tags are opened with
    :meth:`open_tag`, which returns a :class:`ScopedCloser`; closing it writes
    the end tag at the matching depth::

        with DocumentWriter.from_path("index.html") as out:
            with out.open_tag("ul", "nav"):
                out.write_tag("li", "Home")

    A sink passed to the constructor stays open after :meth:`close`. Writers
    built with :meth:`from_stream` or :meth:`from_path` release the text layer
    they created, and :meth:`from_path` also closes the file it opened.
    """

    def __init__(self, sink: Sink, options: Optional[WriterOptions] = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._writer: Any = sink
        self._stream: Optional[BinaryIO] = None
        self._owns_writer = False
        self._closed = False
        self._level = 0

    @classmethod
    def from_stream(cls, stream: BinaryIO, options: Optional[WriterOptions] = None) -> "DocumentWriter":
        """Write encoded text to a caller-owned byte stream."""

        options = options or DEFAULT_OPTIONS
        writer = cls(wrap_binary(stream, options), options)
        writer._owns_writer = True
        return writer

    @classmethod
    def from_path(cls, path: PathLike, options: Optional[WriterOptions] = None) -> "DocumentWriter":
        """Create or truncate ``path`` and write to it."""

        options = options or DEFAULT_OPTIONS
        stream, text = open_file_sink(path, options)
        writer = cls(text, options)
        writer._stream = stream
        writer._owns_writer = True
        return writer

    @property
    def level(self) -> int:
        """Number of tags currently open."""

        return self._level

    @property
    def closed(self) -> bool:
        return self._closed

    def _indent(self) -> str:
        return self.options.indent_unit * self._level

    def _emit(self, text: str) -> None:
        self._writer.write(text)

    def _write_line(self, text: str) -> None:
        self._emit(self._indent() + text + "\n")

    def open_tag(self, name: str, attributes: Attributes | str | None = None) -> ScopedCloser:
        """Write a start tag and return the handle that closes it.

        ``attributes`` is a mapping (or sequence of pairs) rendered in order; a
        plain string is shorthand for ``{"class": value}``.
        """

        self._write_line(f"<{name}{render_attributes(attributes)}>")
        self._level += 1
        return ScopedCloser(lambda: self.close_tag(name))

    def close_tag(self, name: str) -> None:
        """Write an end tag one level shallower.

        Normally reached through the closer returned by :meth:`open_tag`.
        """

        if self._level == 0:
            raise UnbalancedTagError(f"close_tag({name!r}) with no open tag")
        self._level -= 1
        self._write_line(f"</{name}>")

    def write_text(self, text: Any) -> None:
        self._write_line(escape_text(text))

    def write_raw(self, text: Any) -> None:
        """Write ``text`` on its own indented line without escaping it.

        ``None`` writes an empty indented line, as :meth:`write_text` does.
        """

        self._write_line("" if text is None else str(text))

    def write_tag(
        self,
        name: str,
        text: Optional[str] = None,
        attributes: Attributes | str | None = None,
    ) -> None:
        """Write a leaf element: start tag, optional escaped text, end tag."""

        with self.open_tag(name, attributes):
            if text is not None:
                self.write_text(text)

    def break_line(self) -> None:
        self._write_line("<br/>")

    def nbsp(self, count: int = 1) -> None:
        # Inline: no indentation and no line break.
        self._emit("&nbsp;" * count)

    def flush(self) -> None:
        self._writer.flush()

    def _release_writer(self) -> None:
        if self._stream is not None:
            self._writer.close()
        else:
            # from_stream: the byte stream belongs to the caller. Detach even
            # when the final flush fails so the text layer never closes it.
            try:
                self._writer.flush()
            finally:
                self._writer.detach()

    def close(self) -> None:
        """Release whatever the writer created; safe to call more than once."""

        if self._closed:
            return
        self._closed = True
        if self._level:
            warn(f"webwriter: closing writer with {self._level} tag(s) still open")
        try:
            if self._owns_writer:
                self._release_writer()
        finally:
            if self._stream is not None:
                self._stream.close()

    def __enter__(self) -> "DocumentWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_writer(target: PathLike | BinaryIO | Sink, options: Optional[WriterOptions] = None) -> DocumentWriter:
    """Pick the right constructor for a path, byte stream or text sink."""

    if is_path(target):
        return DocumentWriter.from_path(target, options)
    if is_binary_stream(target):
        return DocumentWriter.from_stream(target, options)
    return DocumentWriter(target, options)


__all__ = ["DocumentWriter", "Sink", "open_writer"]
