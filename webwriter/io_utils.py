"""Helpers for opening sinks and line sources, and for diagnostics."""

from __future__ import annotations

import io
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, TextIO, Tuple, Union

from .config import WriterOptions

PathLike = Union[str, os.PathLike]
LineSource = Union[PathLike, BinaryIO, TextIO, Iterable[str]]


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


def is_path(source: object) -> bool:
    return isinstance(source, (str, os.PathLike))


def is_binary_stream(source: object) -> bool:
    return isinstance(source, (io.RawIOBase, io.BufferedIOBase))


def wrap_binary(stream: BinaryIO, options: WriterOptions) -> io.TextIOWrapper:
    """Layer a text stream over a byte stream using the writer's encoding."""

    return io.TextIOWrapper(
        stream,
        encoding=options.encoding,
        errors=options.errors,
        newline=options.newline,
    )


def open_file_sink(path: PathLike, options: WriterOptions) -> Tuple[BinaryIO, io.TextIOWrapper]:
    """Create (or truncate) ``path`` and return the byte sink and its text layer.

    Parent directories are created as needed.
    """

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    stream = file_path.open("wb")
    try:
        return stream, wrap_binary(stream, options)
    except BaseException:
        stream.close()
        raise


@contextmanager
def open_line_source(source: LineSource, options: WriterOptions) -> Iterator[Iterable[str]]:
    """Resolve ``source`` to an iterable of lines.

    Paths are opened and closed here. Byte streams get a temporary text layer
    that is detached afterwards so the caller's stream stays open. Text
    streams and other iterables are used as they are.
    """

    if is_path(source):
        with open(source, "r", encoding=options.encoding, errors=options.errors) as fh:
            yield fh
    elif is_binary_stream(source):
        reader = io.TextIOWrapper(source, encoding=options.encoding, errors=options.errors)
        try:
            yield reader
        finally:
            reader.detach()
    else:
        yield source


def strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


__all__ = [
    "LineSource",
    "PathLike",
    "is_binary_stream",
    "is_path",
    "open_file_sink",
    "open_line_source",
    "strip_line_ending",
    "warn",
    "wrap_binary",
]
