"""Correlation ID generation."""

from __future__ import annotations

import random
import threading
from typing import Protocol

DEFAULT_ID_BITS = 63


class IdProvider(Protocol):
    """Generate correlation identifiers for annotated errors."""

    def new_id(self) -> str:  # pragma: no cover - protocol definition
        """Return a new, usually unique, identifier."""


class RandomIdProvider(IdProvider):
    """Uppercase hex of a random non-negative integer, without zero padding.

    Not cryptographically secure; collisions are an accepted risk.
    """

    def __init__(self, seed: int | None = None, bits: int = DEFAULT_ID_BITS) -> None:
        if bits < 1:
            raise ValueError(f"bits must be positive, got {bits}")
        self._rng = random.Random(seed)
        self._bits = bits
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            value = self._rng.getrandbits(self._bits)
        return f"{value:X}"
