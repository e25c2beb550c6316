"""Thread-safe string associations.

Locking Strategy:
- Each store owns a ReadWriteLock; stores never share locks
- Any number of readers hold the lock together
- A waiting writer holds off new readers until it has run
"""

import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager


class ReadWriteLock:
    """Many-readers/one-writer lock built on a condition variable."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the block."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class AssociativeStore:
    """String to string map safe for concurrent use.

    Only get/set/unset (plus read-only snapshots) are exposed; the lock is
    an implementation detail.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._lock = ReadWriteLock()

    def get(self, key: str) -> tuple[str, bool]:
        """Return ``(value, True)`` if present, else ``("", False)``."""
        with self._lock.read():
            if key in self._data:
                return self._data[key], True
            return "", False

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock.write():
            self._data[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        with self._lock.write():
            self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current associations."""
        with self._lock.read():
            return dict(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._data

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)
