"""Synchronized, reference-counted access to system handles."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

__all__ = ["HandleClosedError", "SharedHandle"]


class HandleClosedError(ValueError):
    """Raised when a closed SharedHandle is used."""

    def __init__(self, message: str = "handle already closed") -> None:
        super().__init__(message)


class _Coordinator:
    """Central reference counter for one system handle."""

    def __init__(self, handle: Any, closer: Callable[[Any], Any]) -> None:
        self._lock = threading.Lock()
        self.handle = handle
        self._closer = closer
        self._refs = 0  # the handle is in use while refs >= 0

    def add(self, delta: int) -> None:
        with self._lock:
            if self._refs < 0:
                raise RuntimeError(
                    "attempted use of closed system handle: "
                    "reference counter already below zero"
                )
            self._refs += delta
            if self._refs < 0:
                self._closer(self.handle)


class SharedHandle:
    """Shared access to a system handle by one or more instances.

    Additional instances are made with :meth:`clone`. The system handle is
    released through ``closer`` once every instance has been closed.
    """

    def __init__(self, handle: Any, closer: Callable[[Any], Any]) -> None:
        self._lock = threading.Lock()
        self._source: _Coordinator | None = _Coordinator(handle, closer)

    def clone(self) -> SharedHandle:
        """Return an independent instance sharing the same system handle."""
        with self._lock:
            if self._source is None:
                raise HandleClosedError("cannot clone a handle that has been closed")
            self._source.add(1)
            twin = SharedHandle.__new__(SharedHandle)
            twin._lock = threading.Lock()
            twin._source = self._source
            return twin

    def close(self) -> None:
        """Release this instance; the last one closes the system handle."""
        with self._lock:
            if self._source is None:
                raise HandleClosedError()
            source, self._source = self._source, None
        source.add(-1)

    @property
    def closed(self) -> bool:
        """Whether this instance has been closed."""
        with self._lock:
            return self._source is None

    def value(self) -> Any:
        """Return the protected system handle."""
        with self._lock:
            if self._source is None:
                raise HandleClosedError(
                    "cannot retrieve a system handle that has been closed"
                )
            return self._source.handle

    def __enter__(self) -> SharedHandle:
        return self

    def __exit__(self, *args: object) -> None:
        if not self.closed:
            self.close()