"""Streaming writer for indented HTML documents."""

from .attributes import css_class, render_attributes
from .closer import ScopedCloser
from .config import WriterOptions, load_writer_options
from .errors import (
    UnbalancedTagError,
    UnsupportedDependencyError,
    WebWriterError,
    WriterConfigError,
)
from .escaping import escape_attribute_value, escape_text
from .writer import DocumentWriter, Sink, open_writer

__version__ = "0.1.0"

__all__ = [
    "DocumentWriter",
    "ScopedCloser",
    "Sink",
    "UnbalancedTagError",
    "UnsupportedDependencyError",
    "WebWriterError",
    "WriterConfigError",
    "WriterOptions",
    "css_class",
    "escape_attribute_value",
    "escape_text",
    "load_writer_options",
    "open_writer",
    "render_attributes",
]
