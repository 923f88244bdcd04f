# app_utils/guarded_value.py
import threading
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class GuardedValue(Generic[T]):
    """
    Value holder that defers writes while locked.

    While locked, `write` only fills a single pending slot (a later write
    replaces an earlier one). The pending value is applied by the first
    `read` made after `unlock`, not by `unlock` itself.

    The guard never blocks callers. An internal threading.Lock keeps the
    value / locked / pending fields consistent when readers and writers run
    on different threads.
    """

    def __init__(self, value: T):
        self._value = value
        self._locked = False
        self._pending = _EMPTY
        self._mutex = threading.Lock()

    def is_locked(self) -> bool:
        with self._mutex:
            return self._locked

    def has_pending(self) -> bool:
        with self._mutex:
            return self._pending is not _EMPTY

    def lock(self):
        with self._mutex:
            self._locked = True

    def unlock(self):
        with self._mutex:
            self._locked = False

    def read(self) -> T:
        with self._mutex:
            if self._pending is not _EMPTY and not self._locked:
                self._value = self._pending
                self._pending = _EMPTY
            return self._value

    def write(self, value: T):
        with self._mutex:
            if self._locked:
                self._pending = value
                return
            self._value = value
            self._pending = _EMPTY

    @contextmanager
    def held(self):
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    def __repr__(self):
        return f"GuardedValue({self._value!r}, locked={self._locked})"
