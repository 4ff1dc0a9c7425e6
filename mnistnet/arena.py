"""A fixed-size pool of float32 storage handed out in contiguous slices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

import numpy as np


class ArenaOverflowError(RuntimeError):
    """Raised when an allocation does not fit in the remaining capacity."""


@dataclass(frozen=True)
class ArenaStats:
    """Snapshot of an arena's capacity and usage, counted in floats."""

    capacity: int
    used: int
    peak: int


class MemoryArena:
    """Bump allocator over a zero-initialised float32 buffer.

    Every allocation is a view into the shared buffer, so writes made through
    one allocation are visible in the arena's contents.
    """

    def __init__(self, total_floats: int) -> None:
        if total_floats < 0:
            raise ValueError("arena capacity must not be negative")
        self._data = np.zeros(total_floats, dtype=np.float32)
        self._offset = 0
        self._used = 0
        self._peak = 0

    @property
    def capacity(self) -> int:
        return self._data.size

    def allocate(self, n: int) -> np.ndarray:
        """Return a view of the next ``n`` floats of the buffer."""
        if n < 0:
            raise ValueError("allocation size must not be negative")
        if self._offset + n > self.capacity:
            raise ArenaOverflowError("MemoryArena: allocation overflow")
        view = self._data[self._offset:self._offset + n]
        self._offset += n
        self._used += n
        self._peak = max(self._peak, self._used)
        return view

    def reset(self) -> None:
        """Start allocating from the beginning again; contents are kept."""
        self._offset = 0
        self._used = 0

    def stats(self) -> ArenaStats:
        return ArenaStats(capacity=self.capacity, used=self._used, peak=self._peak)

    def print_content(self, stream: TextIO) -> None:
        """Write the used part of the buffer as a comma-separated line."""
        stream.write(
            f"MemoryArena Content (used={self._used}, capacity={self.capacity}):\n"
        )
        stream.write(", ".join(format(float(v), "g") for v in self._data[:self._used]))
        stream.write("\n")