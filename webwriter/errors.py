"""Exception types raised by the document writer."""


class WebWriterError(Exception):
    """Base class for writer errors."""


class UnsupportedDependencyError(WebWriterError, ValueError):
    """Raised when a dependency URL has no known asset kind."""


class UnbalancedTagError(WebWriterError, RuntimeError):
    """Raised when a tag is closed with nothing left open."""


class WriterConfigError(WebWriterError, ValueError):
    """Raised when writer options cannot be loaded."""


__all__ = [
    "UnbalancedTagError",
    "UnsupportedDependencyError",
    "WebWriterError",
    "WriterConfigError",
]
