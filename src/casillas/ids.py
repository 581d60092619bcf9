"""Identifier generation for ADF ``localId`` attributes.

Every taskList and taskItem carries a ``localId``. The default generator
returns random UUIDs; ``CounterIdGenerator`` gives deterministic ids for
tests and reproducible output.

The only contract is "practically unique across one conversion call".
Callers that need a stronger guarantee inject their own generator.

Thread Safety:
    ``default_id_generator`` relies on ``os.urandom`` and is safe to call
    from any thread. ``CounterIdGenerator`` serializes access with a lock.

"""

from __future__ import annotations

import random
import threading
import time
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """A no-argument callable producing a unique string."""

    def __call__(self) -> str: ...


def default_id_generator() -> str:
    """Return a random UUID4 string.

    Falls back to a timestamp plus random suffix when the platform has no
    cryptographic randomness source.

    Example:
        >>> len(default_id_generator())
        36
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        # os.urandom unavailable
        return f"id-{time.time_ns():x}-{random.getrandbits(52):x}"


class CounterIdGenerator:
    """Deterministic sequential id generator.

    Usage:
        >>> ids = CounterIdGenerator()
        >>> ids(), ids()
        ('id-1', 'id-2')

    """

    __slots__ = ("_lock", "_next", "prefix")

    def __init__(self, prefix: str = "id-", start: int = 1) -> None:
        self.prefix = prefix
        self._next = start
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self.prefix}{value}"

    def __repr__(self) -> str:
        return f"CounterIdGenerator(prefix={self.prefix!r}, next={self._next})"


__all__ = [
    "CounterIdGenerator",
    "IdGenerator",
    "default_id_generator",
]
