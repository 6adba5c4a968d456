"""One-shot handle for an open tag."""

from __future__ import annotations

from typing import Callable, Optional


class ScopedCloser:
    """Runs a closing action exactly once.

    Returned by :meth:`DocumentWriter.open_tag`. Use it in a ``with`` block so
    the tag is closed on normal exit, early return or error; calling
    :meth:`close` again afterwards does nothing.
    """

    def __init__(self, action: Optional[Callable[[], None]]) -> None:
        self._action = action
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        # Marked first so a failing action is never run a second time.
        self._closed = True
        action, self._action = self._action, None
        if action is not None:
            action()

    def __enter__(self) -> "ScopedCloser":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<ScopedCloser {state}>"


__all__ = ["ScopedCloser"]
