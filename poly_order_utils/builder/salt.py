"""Salt sources — per-order uniqueness values, injected into the builder."""

from __future__ import annotations

import secrets
import threading
from typing import Callable

SaltGenerator = Callable[[], int]

SALT_BITS = 63


def generate_salt() -> int:
    """Random non-negative 63-bit salt from the OS CSPRNG."""
    return secrets.randbits(SALT_BITS)


class SequentialSaltGenerator:
    """Deterministic counter for reproducible runs; safe across threads."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._next = start
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value
