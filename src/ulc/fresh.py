"""
Source of fresh variable names.

Capture-avoiding substitution has to rename bound parameters to names that
were never used before. A `FreshNames` object is a counter: every call issues
the next name (`v1`, `v2`, ...) and no name is issued twice by the same
object. Issuing is guarded by a lock so a single instance can be shared by
reductions running in several threads.
"""

import itertools
import threading
from typing import Container

__all__ = ["FreshNames", "DEFAULT_NAMES"]


class FreshNames:
    def __init__(self, prefix: str = "v"):
        if not prefix:
            raise ValueError("prefix of fresh names cannot be empty")
        self.prefix = prefix
        self._lock = threading.Lock()
        self._counter = itertools.count(1)
        self._issued = 0

    def __iter__(self):
        return self

    def __next__(self) -> str:
        with self._lock:
            n = next(self._counter)
            self._issued = n
        return f"{self.prefix}{n}"

    def fresh(self, avoid: Container[str] = ()) -> str:
        """
        Issue a new name that is not in `avoid`.

        Names rejected because they are in `avoid` are consumed as well.
        """
        while True:
            name = next(self)
            if name not in avoid:
                return name

    @property
    def issued(self) -> int:
        return self._issued

    def reset(self):
        with self._lock:
            self._counter = itertools.count(1)
            self._issued = 0

    def __repr__(self):
        return f"FreshNames(prefix={self.prefix!r}, issued={self.issued})"


# shared by every reduction that does not bring its own counter
DEFAULT_NAMES = FreshNames()
